# polymath

polymath is a set of small helpers that depend only on the standard library.
It covers elementary mathematics, numerical methods, simple physics formulas
and signal transforms. It also provides plain dataclass records for network
packets, cryptographic state, media frames, hardware inventories and other
domains.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### Mathematics

- `polymath.vectors`: `dot_product`, `cross_product` (3-D only), `vector_norm`,
  `is_linear_combination`, `sum_of_subspaces` (column sums) and `direct_sum`
  (the sum of every element). A length mismatch raises `ValueError`.
- `polymath.number_theory`: `gauss_sum`, `combination`, `permutation` and
  `divisibility_theorem`.
- `polymath.numerical`:
  - `e_calculation`, which sums the series for e;
  - `factorial`, which uses the gamma function for arguments that are not
    whole numbers;
  - `exponentiation`, `fractional_exponentiation` (base to the power of minus
    the exponent), `inverse_exponentiation` (roots) and `calculate_logarithm`;
  - `probability`;
  - `limit_result` and `single_variable_limit`;
  - `single_variable_differentiation`, a forward difference;
  - `single_variable_integration`, a left Riemann sum;
  - `multivariable_integration`, which works from the antiderivatives of a
    separable integrand.

  The calculus functions take Python callables.
- `polymath.set_theory`: `subset`, `union` and `intersection` over ordered
  sequences.

### Data structures

- `polymath.linked_list`: `Node` and `CircularLinkedList`. Every node keeps a
  `loopback` link to the root. The list provides `create_and_insert_node`,
  `traverse_until` and `delete_node`.
- `polymath.containers`: `Stack` and `Queue`, which accept an optional
  capacity, and `DataContainer`. Pushing to a full container raises
  `OverflowError`. Popping from an empty one raises `IndexError`.
- `polymath.integer_types`: `IntegerType` with `wrap` and `fits`, and
  `integer_type(name)`, which looks up a type by name, such as `uint8_t` or
  `int512_t`.

### Physics and signals

- `polymath.physics`:
  - the electricity relations `electric_field`, `voltage`, `current` and
    `emf`;
  - the friction relations `friction_on_object` and `frictional_force`;
  - the magnetic field and magnetomotive force of cubes, cuboids, spheres and
    pyramids.
- `polymath.quantum`: `feynman_radiation`, `quantum_voltage`,
  `quantum_reverberation` and `heisenberg_uncertainty`.
- `polymath.sound`: `amplify_sound` and `deamplify_sound`, which shift every
  sample by a fixed amount.
- `polymath.audio`:
  - `receive_audio_window` and `receive_pin_data`, which read samples from
    iterables;
  - `lossless_compression` and `lossless_decompression`, which scale samples
    by their peak level;
  - `lossy_compression`, a delta step with a threshold.
- `polymath.text_compression`:
  - `lossless_compression`, which returns a `CompressedText`, and
    `lossless_decompression`, which restores the original bytes;
  - `lossy_compression` and `lossy_decompression`, which work on the
    differences between consecutive bytes.

### Time and networking

- `polymath.clock`: `utc_offset`, `to_zone` and `zone_names` for a fixed
  table of named zone offsets. When a name is defined more than once, the last
  definition wins.
- `polymath.protocols`:
  - `http_get`, which reads a range of words through a callable into a
    `DataBlock`;
  - `http_persist`;
  - `build_tcp_message` and `send_tcp_message`, which need exactly one
    non-zero address;
  - `count_ticks`.

### Records

These are dataclasses. Their `__post_init__` checks shapes and ranges, and
empty arrays are filled with zeros where a size is given.

- `polymath.network_records`: addresses, packets, and TCP, UDP, HTTP, FTP,
  SFTP, SSH, WebDAV, SSL, TLS, DRM and BLE state. `IPv4Address` and
  `IPv6Address` print in standard notation.
- `polymath.crypto_records`: `KeyPair`, `Playfair`, `AesState`, `RsaKey` (with
  `phi()`), `Block` and `Wallet`.
- `polymath.physics_records`: objects, particles, sensors, planets and stars.
  `EnergyInAnObject.energy()` and `GravitationalField.field()` compute values.
- `polymath.economics`: cash-flow series and alternatives.
  `SinglePaymentFutureAmount.future_amount()` computes P(1 + i)^n.
- `polymath.math_records`: `NumberSet`, `Matrix`, `Tensor`, `PathData`,
  `FixedWidthVector`, `TensorVector`, `Subspace`, `Span` and `Map3D`.
- `polymath.media_records`: film, frames, video, shapes, GPUs, images, MIDI
  and audio, and headset devices.
- `polymath.ml_records`: perceptrons, clusters, transformers, Markov models
  and state-machine states.
- `polymath.hardware_records`: processors, caches, processes, storage, USB
  devices, mice, game-controller inputs, handhelds and smart meters.
- `polymath.life_records`: DNA, RNA, proteins, blood, chromosomes, molecule
  views, and birth charts with `CelestialPosition.decimal_degrees()`.
- `polymath.misc_records`: `PayerInformation`, `SimCard`, `MotionVector`,
  `GridMap`, `DataFlow` and `FileBlock`.

## Examples

```python
from datetime import datetime, timezone

from polymath.number_theory import combination, permutation
from polymath.numerical import single_variable_differentiation
from polymath.clock import to_zone
from polymath.integer_types import integer_type
from polymath.text_compression import lossless_compression, lossless_decompression

print(combination(5, 2), permutation(5, 2))          # 10 20
print(single_variable_differentiation(lambda x: x * x, 3.0, 1e-6))  # about 6.0

noon = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
print(to_zone(noon, "IST").hour, to_zone(noon, "IST").minute)  # 17 30

print(integer_type("uint8_t").wrap(300))             # 44

packed = lossless_compression(b"hello")
assert lossless_decompression(packed) == b"hello"
```

```python
from polymath.containers import Stack
from polymath.network_records import IPv4Address

stack = Stack(capacity=2)
stack.push(1)
stack.push(2)
print(stack.pop())                                   # 2

print(IPv4Address(192, 168, 0, 1))                   # 192.168.0.1
```

## What the package does not do

- It has no probability distributions and no descriptive statistics such as
  mean, median or variance.
- It has no trigonometric functions and no random number generator.
- It has no hash functions and no rendering to a display.
- It has no command-line program. Nothing in it opens sockets, talks to
  devices or writes to storage. The protocol helpers work only through the
  callables you pass in.