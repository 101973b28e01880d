"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# PLAYFIELD (pixels)
# =============================================================================
COLS = 9
ROWS = 5
TILE_W = 100
TILE_H = 100
FIELD_WIDTH = COLS * TILE_W    # 900
FIELD_HEIGHT = ROWS * TILE_H   # 500

# =============================================================================
# SESSION
# =============================================================================
WAVES_TOTAL = 5
STARTING_BALANCE = 10000

# =============================================================================
# WAVES (all times in seconds)
# =============================================================================
WAVE_BASE_COUNT = 5
WAVE_COUNT_PER_WAVE = 2
SPAWN_BASE_DELAY = 0.6
SPAWN_INTERVAL = 0.45
SPAWN_JITTER = 0.6
BOOST_BLOCK_SIZE = 5          # spawn index blocks that bump the multiplier
BOOST_PER_WAVE = 0.3
HP_SCALE_PER_BOOST = 0.12
SPEED_SCALE_PER_BOOST = 0.06

# =============================================================================
# ATTACKERS
# =============================================================================
ATTACKER_SPAWN_X = FIELD_WIDTH + 10
ATTACKER_FEED_OFFSET = 40     # x offset used to find the cell being eaten
ATTACKER_HIT_OFFSET = 18      # half-width used for projectile contact
BOUNDARY_X = 10               # attackers past this line end the game

# =============================================================================
# PROJECTILES
# =============================================================================
PROJECTILE_SPEED = 400.0      # px per second
PROJECTILE_DAMAGE = 1
PROJECTILE_MUZZLE_X = 70      # offset from the defender's tile left edge
VOLLEY_SPREAD = 10            # vertical px between shots of one volley

# =============================================================================
# EXPLOSIONS
# =============================================================================
EXPLOSION_START_RADIUS = 10.0
EXPLOSION_GROWTH = 437.5      # px per second
EXPLOSION_DURATION = 0.38
