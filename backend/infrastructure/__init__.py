"""
Infrastructure adapters: game-data row store and rich text decoding.
"""
