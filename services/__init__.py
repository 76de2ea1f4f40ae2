"""
services/ - Business Logic Layer
=================================
Command parsing, Urban Dictionary lookups and the Telegram sender.
"""
