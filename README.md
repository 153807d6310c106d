# mystat

A tiny arithmetic library. Its main operation doubles an integer and then
adds one to it.

## Installation

```
pip install .
```

## Usage

The functions live in `mystat.calc`:

```python
from mystat.calc import add_one, double_and_add_one

double_and_add_one(2)  # 5
add_one(41)            # 42
```

- `add_one(x)` returns `x + 1`.
- `double_and_add_one(x)` returns `2 * x + 1`.

Both accept only integers. Passing anything else, including `True` or
`False`, raises `TypeError`.

## Example command

Installing the package provides a small demonstration command:

```
mystat-example
```

It prints the result of `double_and_add_one(2)`:

```
mystat::double_and_add_one(2) == 5
```

and exits with status 0. The same can be run with
`python -m mystat.example`. The command takes no options.

## Running the tests

```
pip install ".[test]"
pytest
```