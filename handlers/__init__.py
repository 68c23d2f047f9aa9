"""
handlers/ - Presentation Layer
================================
Console demo and GUI form handlers. Each handler takes user input,
delegates to the UserRepository, and turns the outcome into something
to show the user. No business logic lives here.
"""
