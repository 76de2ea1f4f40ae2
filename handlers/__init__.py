"""
handlers/ - Presentation Layer
================================
Webhook update handling. Each handler turns an incoming message into
reply text, delegates lookups to the appropriate Service, and sends
the response back to the chat.
"""
