# squaremat

A small, mutable square-matrix type for floating-point values. It supports
the usual arithmetic operators, a determinant, a transpose, and comparisons
based on the sum of the elements. It uses only the standard library.

## Installation

```
pip install squaremat
```

## Usage

```python
from squaremat.matrix import SquareMat

a = SquareMat(2)               # 2x2 matrix of zeros
a[0][0], a[0][1] = 1, 2        # a[i] is row i, a list of floats
a[1][0], a[1][1] = 3, 4

b = SquareMat.identity(2)
d = SquareMat.diagonal(3, 5.0)

a.n            # size (number of rows and columns)

a + b          # element-wise addition
a - b          # element-wise subtraction
a * b          # matrix product
a * 2.0        # scalar product (2.0 * a works as well)
a % b          # element-wise product of two matrices
a % 3          # element-wise fmod by an integer
a / 2.0        # scalar division
a ** 3         # matrix power (a ^ 3 does the same)
-a             # negation
~a             # transpose (also a.transpose())
a.det()        # determinant, by cofactor expansion along the first row
a.sum()        # sum of all elements
a.copy()       # independent copy

a *= 2         # in-place forms of *, % and /
a %= 3
a /= 2

a.increment()  # add 1 to every element in place
a.decrement()  # subtract 1 from every element in place
a.fill(6)      # set every element to 6
a.assign(b)    # copy the values of a same-sized matrix into a

print(a)       # one line per row, each value followed by a tab
```

The operators return new matrices; `increment`, `decrement`, `fill` and
`assign` change the matrix in place and return it.

### Comparison

`==`, `<`, `<=`, `>` and `>=` compare the **sums** of the elements. Because
of this, matrices of different sizes can compare as equal. Matrices are
mutable and therefore not hashable.

### Errors

- `ValueError`: creating a matrix of size zero or less, combining matrices
  of different sizes (`+`, `-`, `*`, `%`, `assign`), or raising a matrix to
  a negative power.
- `ZeroDivisionError`: dividing by zero (`/` or `/=`), or an in-place modulo
  by zero (`%=`). A plain `a % 0` does not raise; every element becomes NaN.

## Demo

To print a few example matrices and results of operations on them, run:

```
squaremat-demo
```

The command takes no options besides `--help`.