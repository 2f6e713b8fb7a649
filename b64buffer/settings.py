"""
<Program Name>
  settings.py

<Copyright>
  See LICENSE for licensing information.

<Purpose>
  Store all codec-related settings used by b64buffer.  The values are read
  at call time, so they may be modified at runtime, e.g.
  'b64buffer.settings.RESERVE_CAPACITY = False'.
"""

# Number of bytes a new 'ByteBuffer' pre-allocates when no initial capacity is
# passed.  The buffer grows past this on demand.
DEFAULT_BUFFER_CAPACITY = 64

# Whether 'codec.encode' and 'codec.decode' forward a size hint, derived from
# 'operator.length_hint' of their input, to 'BufferInterface.reserve_capacity'
# before writing.  The hint is only ever an estimate; single-pass iterators
# usually report 0.
RESERVE_CAPACITY = True
