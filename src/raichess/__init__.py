"""
RaiChess adaptive rating package.

Components:
- elo: rating update with accuracy blend, expected score, confidence bands
- difficulty: rating bands -> Stockfish strength profile
- history: immutable cumulative EloStats snapshots
- session: the game -> rating -> next opponent feedback loop
- game/referee/engine_opponent/accuracy: python-chess plumbing for playing and scoring games
"""
# Package exports are intentionally minimal; import modules directly as needed.
