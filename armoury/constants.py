"""
Shared constants for the Animated Armoury rebalancer.

Centralizes rule markers and default values so classifiers, the batch
rebalancer and the host surfaces agree on them.
"""

# =============================================================================
# Materials
# =============================================================================

# Material used whenever detection finds nothing better
DEFAULT_MATERIAL = "steel"

# Keyword marker for generic material keywords (WeapMaterialSteel, ...)
MATERIAL_MARKER = "material"

# Keyword marker for WACCF material keywords (WACCF_WeaponMaterialOrcish, ...)
WACCF_MATERIAL_MARKER = "waccf_weaponmaterial"

# Short-name markers for conjured weapons
BOUND_MARKER = "bound"
MYSTIC_MARKER = "mystic"

# Dragon Priest claws use orcish stats regardless of their keywords
DRAGON_PRIEST_CLAWS = frozenset({"dragonpriestclaws", "dragonpriestclawsleft"})

# Stagger granted to stalhrim weapons outside WACCF mode
STALHRIM_STAGGER_BONUS = 0.1


# =============================================================================
# Weapon types
# =============================================================================

ANIMATED_WEAPON_TYPES = (
    "claw",
    "rapier",
    "katana",
    "whip",
    "pike",
    "quarterstaff",
    "halberd",
)


# =============================================================================
# Host defaults
# =============================================================================

# Plugin shipping the animated weapons
DEFAULT_PLUGIN = "NewArmoury.esp"

# Worker threads for batch runs
DEFAULT_MAX_WORKERS = 4
MIN_WORKERS = 1
MAX_WORKERS = 32

# Directory under the user's home for config and logs
APP_DIR_NAME = ".animated_armoury"
