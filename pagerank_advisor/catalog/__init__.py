"""
Reference data for the advisor.

Responsibilities:
- Load the experimentally characterised example datasets.
- Expose them as graph descriptors ready for the recommendation engine.
- Describe the algorithm families the engine can recommend.
"""
