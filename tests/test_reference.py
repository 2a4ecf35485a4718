import random
from dataclasses import dataclass

import pytest

from postfix.evaluator import evaluate
from postfix.outcome import Success


@dataclass
class BinaryNode:
    symbol: str
    left: "Node"
    right: "Node"


Node = int | BinaryNode


def _generate(rng: random.Random, depth: int, digits_only: bool) -> Node:
    if depth == 0 or rng.random() < 0.3:
        return rng.randint(0, 9) if digits_only else rng.randint(-20, 99)
    return BinaryNode(
        symbol=rng.choice("+-*/%"),
        left=_generate(rng, depth - 1, digits_only),
        right=_generate(rng, depth - 1, digits_only),
    )


def _as_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _reference(node: Node) -> int:
    if isinstance(node, int):
        return node
    a = _reference(node.left)
    b = _reference(node.right)
    if node.symbol == "+":
        return _as_int32(a + b)
    elif node.symbol == "-":
        return _as_int32(a - b)
    elif node.symbol == "*":
        return _as_int32(a * b)
    if b == 0:
        raise ZeroDivisionError
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return _as_int32(q) if node.symbol == "/" else a - b * q


def _postfix(node: Node, separator: str) -> str:
    if isinstance(node, int):
        return str(node)
    return separator.join([_postfix(node.left, separator), _postfix(node.right, separator), node.symbol])


def _random_valid_tree(seed: int, digits_only: bool) -> tuple[BinaryNode, int]:
    rng = random.Random(seed)
    while True:
        tree = _generate(rng, depth=4, digits_only=digits_only)
        if not isinstance(tree, BinaryNode):
            continue
        try:
            return tree, _reference(tree)
        except ZeroDivisionError:
            continue


@pytest.mark.parametrize("seed", range(100))
def test_matches_recursive_reference(seed: int) -> None:
    tree, expected = _random_valid_tree(seed, digits_only=False)
    assert evaluate(_postfix(tree, " ")) == Success(expected)


@pytest.mark.parametrize("seed", range(50))
def test_dense_and_spaced_forms_agree(seed: int) -> None:
    tree, expected = _random_valid_tree(seed, digits_only=True)
    assert evaluate(_postfix(tree, "")) == evaluate(_postfix(tree, " ")) == Success(expected)
