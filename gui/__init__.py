"""
gui/ - Desktop Front-end
=========================
PyQt5 widgets. Widgets only move text between fields and the form
handler; all database work goes through handlers.user_handler.
"""
