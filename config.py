# Konfigurasi grid pathfinder

# Search Configuration
NO_PATH = -1
DEFAULT_BUFFER_CAPACITY = 256
NEIGHBOR_OFFSETS = [(1, 0), (0, 1), (-1, 0), (0, -1)]  # +x, +y, -x, -y

# Map cell values
BLOCKED = 0
PASSABLE = 1
PASSABLE_CHARS = ".SG"  # S dan G = start/goal markers, tetap passable
BLOCKED_CHARS = "#"

# MQTT Configuration
MQTT_BROKER = "localhost"
MQTT_PORT = 1883
MQTT_KEEPALIVE = 60
MQTT_CLIENT_ID = "PATH_SERVICE"
MQTT_TOPIC_PATH_REQUEST = "grid/path/request"
MQTT_TOPIC_PATH_RESULT = "grid/path/result"

# Logging
LOG_LEVEL = "INFO"

# Demo Configuration
DEMO_MAPS = {
    'open': {
        'rows': [
            "....",
            "...#",
            "....",
        ],
        'start': (0, 0),
        'goal': (1, 2),
    },
    'detour': {
        'rows': [
            "........",
            ".######.",
            ".#....#.",
            ".#.##.#.",
            "...#....",
        ],
        'start': (2, 3),
        'goal': (5, 3),
    },
    'walled': {
        'rows': [
            "........",
            "....###.",
            "....#.#.",
            "....###.",
        ],
        'start': (0, 0),
        'goal': (5, 2),
    },
    'single': {
        'rows': ["."],
        'start': (0, 0),
        'goal': (0, 0),
    },
}
