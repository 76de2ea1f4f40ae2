"""
handlers/replies.py
-------------------
Fixed reply texts for /help, /start and /define without a query.
"""

HELP_TEXT = (
    "Send /define command with your query to get definition from Urban Dictionary. "
    "Also you can append *number of definition which you wish to get.\n\n"
    "Example: \"/define handsome\" or \"/define handsome *2\" to get second definition."
)


def greeting_text(first_name: str) -> str:
    """Greeting shown for /start and for /define without a query."""
    return (
        f"Hello, {first_name}!\n\n"
        f"I'm Urban Dictionary Bot. Send me /help command to see what I can do. 😉"
    )
