"""
api - FastAPI backend for the Animated Armoury rebalancer.

Provides RESTful API endpoints for:
- Classifying a weapon (type, material)
- Rebalancing a batch of weapons
- Querying the base stat and damage-offset tables
"""

__version__ = "1.0.0"
