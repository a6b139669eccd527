"""
Shared service utilities.

- http.py      - requests session with timeout and User-Agent (no retries)
"""
