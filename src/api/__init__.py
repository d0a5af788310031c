# src/api/__init__.py
# =====================
# API Layer — Vaani
#
# Responsibility:
#   - Expose the caption simplification service over HTTP (captions.py)
#   - Map request options onto service defaults from the environment
#   - Delegate all text processing to src.simplifier
