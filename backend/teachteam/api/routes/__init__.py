"""REST Routes — one router per resource, registered explicitly in main.py."""
