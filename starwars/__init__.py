"""Star Wars catalog API: characters, planets and episodes."""
