"""Core configuration, application factory and exceptions."""
