"""
Controllers Package

HTTP blueprints exposing the game service.
"""
