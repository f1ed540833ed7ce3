"""
The MODEL layer holds the cached state.
It has NO knowledge of how an inverse is computed; the solvers layer
decides when to fill the cache, the model only stores and clears it.
"""
