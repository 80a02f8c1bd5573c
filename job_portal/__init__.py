"""Job portal core package.

The package is structured around a small number of seams:
- `models.py` defines the canonical schema every provider maps into.
- `sources/` contains per-provider connectors that fetch and normalize jobs.
- `aggregator.py` fans a search out to the connectors and merges the results.
- `recommend.py` and `demand.py` score local postings against a seeker's skills.
- `api.py` exposes everything over HTTP.
"""

__version__ = "0.1.0"
