"""
Predicate components.

- kinds/       - runtime type classification, emptiness, leap years
- formats/     - string format validators
- environment/ - platform and user-agent detectors (ports + adapters)
"""
