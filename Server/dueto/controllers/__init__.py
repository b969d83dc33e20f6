"""
Controllers Package

HTTP blueprints for the round and the leaderboard.
"""
