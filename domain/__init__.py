"""
Domain package - models, schemas, enums and constants of the food database.
"""
