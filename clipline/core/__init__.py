"""Core intermediate representation, loading and word resolution.

WHY: Every other layer — phrase segmentation, subtitle emission, clip
interval checks — works on the same segment and word structures. The core
package holds those structures and the logic that turns loosely-shaped
recognizer output into them.

HOW: ir.py defines the dataclasses, loader.py validates a transcript dict
and builds the IR, resolver.py flattens segments into a strictly
timestamped word sequence.

RULES:
- IR dataclasses are the contract — change with care
- Nothing in core knows about captions or clips
"""
