## config.py
import os
import sys
# Receiver configuration constants
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
LOG_DIR = os.path.join(BASE_DIR, 'logs')

if sys.platform == 'win32':
    SERIAL_PORTS = ['COM3', 'COM4', 'COM5', 'COM6', 'COM7']
else:
    SERIAL_PORTS = ['/dev/ttyUSB0', '/dev/ttyACM0', '/dev/ttyUSB1', '/dev/ttyACM1']

BAUD_RATE       = 9600
TIMEOUT         = 1.0
SETTLE_DELAY    = 1.0   # wait after opening, the Arduino resets on connect
MAX_LINE_LENGTH = 256
MAX_POINTS      = 500   # points kept in the rotor plot

FIN_SENTINEL    = 'FIN'
BANNER_SENTINEL = 'SISTEMA PRT-7 ACTIVO'
