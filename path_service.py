import json
from typing import Dict, List

import paho.mqtt.client as mqtt

import config
from grid import GridMap, InvalidInputError, position_xy
from pathfinding import find_path


def _grid_from_request(data: Dict) -> GridMap:
    cells = data.get('cells')
    if cells is None:
        raise InvalidInputError("request has no 'cells'")
    if not isinstance(cells, list):
        raise InvalidInputError("'cells' must be a list")
    # Baris string ("..#.") atau flat list 0/1
    if cells and isinstance(cells[0], (str, list)):
        return GridMap.from_rows(cells)
    try:
        width, height = int(data['width']), int(data['height'])
    except (KeyError, TypeError, ValueError):
        raise InvalidInputError("flat 'cells' need integer 'width' and 'height'") from None
    return GridMap(bytes(1 if c else 0 for c in cells), width, height)


def _point(data: Dict, key: str) -> List[int]:
    value = data.get(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InvalidInputError(f"'{key}' must be an [x, y] pair")
    return [int(value[0]), int(value[1])]


def handle_request(data: Dict) -> Dict:
    """Answer one path request; never raises for bad input."""
    request_id = data.get('request_id')
    try:
        grid = _grid_from_request(data)
        start = _point(data, 'start')
        goal = _point(data, 'goal')
        capacity = int(data.get('capacity', config.DEFAULT_BUFFER_CAPACITY))
        # path tidak pernah lebih panjang dari jumlah cell
        size = min(capacity, grid.width * grid.height)
        buffer = [0] * max(size, 0)
        length = find_path(start[0], start[1], goal[0], goal[1],
                           grid.cells, grid.width, grid.height,
                           buffer, size)
    except (InvalidInputError, TypeError, ValueError) as e:
        return {
            'request_id': request_id,
            'status': 'invalid',
            'error': str(e),
        }

    if length == config.NO_PATH:
        return {
            'request_id': request_id,
            'status': 'no_path',
            'length': length,
            'path': [],
            'coords': [],
        }

    path = buffer[:max(length, 1)]
    return {
        'request_id': request_id,
        'status': 'ok',
        'length': length,
        'path': path,
        'coords': [list(position_xy(pos, grid.width)) for pos in path],
    }


class PathService:
    """Serves path requests over MQTT."""

    def __init__(self, client=None, connect: bool = True):
        self.requests_served = 0

        if client is None:
            client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2,
                                 client_id=config.MQTT_CLIENT_ID)
        self.mqtt_client = client
        self.mqtt_client.on_connect = self.on_connect
        self.mqtt_client.on_message = self.on_message

        if connect:
            try:
                self.mqtt_client.connect(config.MQTT_BROKER, config.MQTT_PORT, config.MQTT_KEEPALIVE)
                self.mqtt_client.loop_start()
            except Exception as e:
                print(f"PathService MQTT connection failed: {e}")

    def on_connect(self, client, userdata, flags, reason_code, properties=None):
        print(f"PathService connected to MQTT broker ({reason_code})")
        client.subscribe(config.MQTT_TOPIC_PATH_REQUEST)

    def on_message(self, client, userdata, msg):
        try:
            data = json.loads(msg.payload.decode())
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            print(f"PathService: malformed request on {msg.topic}: {e}")
            return
        if not isinstance(data, dict):
            print(f"PathService: request on {msg.topic} is not a JSON object")
            return

        result = handle_request(data)
        self.publish_result(result)

    def publish_result(self, result: Dict):
        topic = f"{config.MQTT_TOPIC_PATH_RESULT}/{result.get('request_id')}"
        self.mqtt_client.publish(topic, json.dumps(result))
        self.requests_served += 1
        print(f"PathService: request {result.get('request_id')} -> {result['status']}"
              + (f" ({result['length']} steps)" if result['status'] == 'ok' else ""))

    def stop(self):
        self.mqtt_client.loop_stop()
        self.mqtt_client.disconnect()
