#!/usr/bin/env python3
"""
Stand-in for the piradio program.

Behaves like the real command line for development without hardware:

    fake_piradio.py <station>   # tune, remembers the station in a state file
    fake_piradio.py             # print status

Point the server at it with:
    RADIO_EXECUTABLE=$PWD/scripts/fake_piradio.py uvicorn tuner.api.main:app

The state file defaults to /tmp/fake_piradio.state and can be moved with
FAKE_PIRADIO_STATE.
"""

import os
import sys
from pathlib import Path

STATIONS = {
    'r1': ("Radio 1", 98.8),
    'r2': ("Radio 2", 89.1),
    'r3': ("Radio 3", 91.3),
    'r4': ("Radio 4", 93.5),
    'jazz': ("Jazz FM", 102.2),
    'classic': ("Classic FM", 100.9),
}

STATE_FILE = Path(os.environ.get('FAKE_PIRADIO_STATE', '/tmp/fake_piradio.state'))


def tune(station: str) -> int:
    if station not in STATIONS:
        print(f"Unknown station: {station}", file=sys.stderr)
        return 1
    STATE_FILE.write_text(station)
    print(f"Tuned to {STATIONS[station][0]}")
    return 0


def status() -> int:
    station = STATE_FILE.read_text().strip() if STATE_FILE.exists() else ''
    if station not in STATIONS:
        print("\nStation: none\n")
        return 0
    name, mhz = STATIONS[station]
    # Padding and blank lines as the real program prints them
    print(f"\n  Station: {name}\nFrequency: {mhz:.1f} MHz\n   \n  Signal: 87%\n")
    return 0


def main(argv) -> int:
    if len(argv) > 1:
        return tune(argv[1])
    return status()


if __name__ == '__main__':
    sys.exit(main(sys.argv))
