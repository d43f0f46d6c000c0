# gemini_he

Plaintext-side helpers for two-party protocols that evaluate convolutions
and batch normalisation on secret-shared tensors under lattice-based
homomorphic encryption: shapes, shape inference, placing tensors into
polynomial coefficients, packing, and checks on Boolean triples.

## Modules

- `gemini_he.tensor_shape` — `Padding` (`VALID`, `SAME`) and `TensorShape`.
  A shape is valid when it holds at least one element; two shapes are equal
  only when both are valid and every dimension matches. `channels()`,
  `height()`, `width()` need a 3D shape, `rows()`/`cols()` a 2D one and
  `length()` a 1D one, otherwise `ValueError` is raised. `update(d, size)`
  rejects out-of-range dimensions and negative sizes with `ValueError`.
- `gemini_he.shape_inference`
  - `make_same_pad_shape(tensor_shape, filter_shape)` returns the SAME-padded
    shape, or `None` when the shapes differ in rank or are invalid.
  - `conv2d_output_shape(tensor_shape, filter_shape, padding, stride)` returns
    the single-channel output shape, or `None` when it would be empty.
  - `conv2d_slicing(tensor_shape, filter_shape, poly_degree, padding, stride)`
    returns a `ConvSlicing` (`strided_shape`, `paddings`, `slice_strides`)
    describing how the input is cut into slices that fit `poly_degree`
    coefficients; it raises `GeminiError` with `Code.ERR_INVALID_ARG` when the
    shapes cannot be convolved or do not fit.
- `gemini_he.indexers` — `ImageIndexer` places element `(c, h, w)` at
  `c*H*W + h*W + w`; `FilterIndexer` places it reversed from
  `index_begin()`, so that a polynomial product yields the convolution.
  `ConvIndexer.pad_pow2(lower, upper)` gives the largest power of two not
  above `upper` when `upper >= 2*lower`, else `upper`. Invalid shapes, and
  bad filter indices, are logged as fatal and raise `FatalLogError`; bad
  image indices raise `IndexError`.
- `gemini_he.encoding` — `Role`; `encode_coefficients(ishape, fshape, tensor,
  indexer, poly_degree)` scatters a 3D tensor into a zeroed `uint64` NumPy
  array; `reduce_to_plaintext(coeffs, poly_degree, plain_modulus)` reduces
  coefficients modulo the plaintext modulus and zero-pads them to
  `poly_degree`. Both raise `GeminiError` on bad input.
- `gemini_he.bn_packing` — `pack(mat, scales)` flattens a `C x H x W` tensor
  and repeats one scale per channel alongside it; `add_mod(a, b, modulus)`
  adds integers or arrays modulo `modulus` without 64-bit overflow.
- `gemini_he.bn_dispatch` — `prefers_vector_packing(ishape, poly_degree)` is
  true when per-channel packing (`ceil(H*W/N) * C` ciphertexts) needs at least
  as many ciphertexts as flat packing (`ceil(H*W*C/N) * 3`).
- `gemini_he.triples` — `triple_length(num_triples, packed)` (bytes needed,
  eight triples per byte when packed), `bitmask(bits, width=64)` and
  `verify_triples(a1, b1, c1, a2, b2, c2)`, which checks
  `(a1 ^ a2) & (b1 ^ b2) == c1 ^ c2` at every position.
- Support code:
  - `gemini_he.errors` — `Code`, `code_message(code)` and `GeminiError`,
    whose `code` attribute holds the failing `Code`.
  - `gemini_he.log` — `Severity`, `log(severity, message, fname, line,
    stream)`, `parse_log_level`, `min_log_level_from_env` and
    `FatalLogError`. Messages below the level in `GEMINI_CPP_MIN_LOG_LEVEL`
    (read once, default 0) are dropped; fatal messages are always written and
    then raise `FatalLogError`.
  - `gemini_he.mathutil` — `floor_sqrt`, `ceil_sqrt`, `ceil_div`,
    `is_two_power`, `gcd`, `lcm`, `log2`, `rint`, `is_close` and `ru128`
    (splits a float into 64-bit low and high words).
  - `gemini_he.timer` — `AutoTimer(units=1, tag=None)`, an accumulating
    timer and context manager; `stop()` adds to `elapsed` and prints it when a
    tag is set.
  - `gemini_he.threadpool` — `ThreadPool(size)` whose `enqueue` returns a
    `concurrent.futures.Future`; `close()` drains queued work and joins the
    workers.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
from gemini_he.tensor_shape import Padding, TensorShape
from gemini_he.shape_inference import conv2d_output_shape, conv2d_slicing

image = TensorShape([3, 32, 32])
kernel = TensorShape([3, 3, 3])

print(conv2d_output_shape(image, kernel, Padding.SAME, 1))  # [1, 32, 32]

slicing = conv2d_slicing(image, kernel, 4096, Padding.SAME, 1)
print(slicing.slice_strides)  # (3, 34, 34)
```

## What this package does not do

It performs no encryption, decryption or ciphertext arithmetic, holds no
encryption parameters or keys, and has no network layer: it does not run the
two-party convolution, batch-norm or fully connected protocols, nor generate
Boolean triples by oblivious transfer. It provides the shape, encoding,
packing and checking steps that such protocols rely on.