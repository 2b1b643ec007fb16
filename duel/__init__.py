"""
Duel - Rules engine for a two-player civilization-building card duel.

The engine owns the whole match and enforces every rule:
- Card economy (resources, trading, link symbols)
- The shared staggered card pyramid of each age
- The military conflict track
- The science race
- Victory point scoring

Transport, rooms and bots sit around the engine and only talk to it
through validated actions and the state projection.
"""

__version__ = "0.1.0"
