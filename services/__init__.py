"""
services/ - Service Layer
==========================
Features built on top of the repositories, such as file exports.
"""
