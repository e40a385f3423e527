"""Sequential test booter: fork, exec and wait for each test binary in turn."""
