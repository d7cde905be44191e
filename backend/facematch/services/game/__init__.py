"""Quiz domain services: question selection, session tracking, and the
serve/check/skip controller.

Routes and socket handlers import from here, keeping transport concerns
separated from core game mechanics.
"""
