"""Bearer-token authentication and the admin authorization gate."""
