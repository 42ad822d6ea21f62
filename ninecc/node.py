from dataclasses import dataclass
from enum import IntEnum

from ninecc.token import Token


class NodeKind(IntEnum):
    Add = 1
    Sub = 2
    Mul = 3
    Div = 4


@dataclass(frozen=True)
class NumberNode:
    value: int
    token: Token


@dataclass(frozen=True)
class BinaryNode:
    kind: NodeKind
    left: "Node"
    right: "Node"
    token: Token


Node = BinaryNode | NumberNode


def new_binary(kind: NodeKind, left: Node, right: Node, token: Token) -> BinaryNode:
    return BinaryNode(kind, left, right, token)


def new_number(value: int, token: Token) -> NumberNode:
    return NumberNode(value, token)
