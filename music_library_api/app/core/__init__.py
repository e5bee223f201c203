"""Configuration, logging and locking primitives shared by the app."""
