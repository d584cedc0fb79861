"""Game services: scoring rules, the session store and player actions."""
