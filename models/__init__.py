"""
models/ - Domain Layer
=======================
Dataclasses for incoming messages, parsed commands, dictionary
entries and outbound replies. Payload validation lives here.
"""
