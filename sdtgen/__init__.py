"""sdtgen - Generate systemd service and timer units.
"""

__version__ = '0.1.0'
