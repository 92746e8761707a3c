"""AI-backed pieces of the terminal: cooldown gate, provider clients, flows."""
