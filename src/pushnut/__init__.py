"""pushnut — push sample apps to Cloud Foundry and time every phase.

Built on the ``cf`` command line interface with a strict layered
architecture.
"""

from pushnut.version import __version__

__all__: list[str] = ["__version__"]
