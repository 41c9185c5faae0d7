"""Staff records application.

Holds the credential store, staff records with their contracts,
promotions and postings, and the JSON API the React client talks to.
"""
