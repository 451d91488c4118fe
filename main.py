import argparse
import logging
import time

import config
from grid import GridMap
from pathfinding import find_path


def run_demo(name: str, capacity: int) -> int:
    demo = config.DEMO_MAPS[name]
    grid = GridMap.from_rows(demo['rows'])
    (sx, sy), (gx, gy) = demo['start'], demo['goal']
    buffer = [0] * capacity

    length = find_path(sx, sy, gx, gy, grid.cells, grid.width, grid.height, buffer, capacity)

    if length == config.NO_PATH:
        print(f"[{name}] no path from {(sx, sy)} to {(gx, gy)} within {capacity} steps")
        return length

    steps = buffer[:max(length, 1)]
    coords = [grid.xy(pos) for pos in steps]
    print(f"[{name}] {(sx, sy)} -> {(gx, gy)}: {length} steps")
    print(f"  ids:    {steps}")
    print(f"  coords: {coords}")
    return length


def main(argv=None):
    parser = argparse.ArgumentParser(description="Grid A* shortest path demo.")
    parser.add_argument("maps", nargs="*", help=f"demo maps to run (default: all of {sorted(config.DEMO_MAPS)})")
    parser.add_argument("--capacity", type=int, default=config.DEFAULT_BUFFER_CAPACITY,
                        help="output buffer capacity in cells")
    parser.add_argument("--serve", action="store_true",
                        help="serve path requests over MQTT instead of running demos")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)

    if args.serve:
        from path_service import PathService

        service = PathService()
        print(f"Listening on {config.MQTT_TOPIC_PATH_REQUEST} (Ctrl+C to stop)")
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            service.stop()
        return 0

    for name in args.maps or config.DEMO_MAPS:
        if name not in config.DEMO_MAPS:
            parser.error(f"unknown demo map: {name}")
        run_demo(name, args.capacity)
    return 0


if __name__ == "__main__":
    main()
