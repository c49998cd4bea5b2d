"""
Service layer abstraction.

``storage`` defines the operations the API handlers rely on and the
in-memory implementation used by this demo; ``seed`` loads the demo
dataset.  Swapping the in-memory store for a database only requires a
new ``Storage`` implementation, not changes to the API handlers.
"""
