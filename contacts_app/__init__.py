"""
Contacts App - Bounded In-Memory Contact Directory

A small contact directory that stores entries up to a fixed capacity and
supports adding, listing, finding and removing contacts, as well as
changing their phone numbers, from an interactive text menu.
"""

__version__ = "0.1.0"
__author__ = "Contacts App Team"
