"""
Application Layer

Use cases for the order board, menu, floor plan and dashboard, plus the
derived views and DTOs they hand to the API.
"""
