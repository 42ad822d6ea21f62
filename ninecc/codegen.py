import logging
from typing import assert_never

from ninecc.node import BinaryNode, Node, NodeKind, NumberNode
from ninecc.utils import imm32_max, imm32_min

logger = logging.getLogger(__name__)


def push(result: list[str], depth: int) -> int:
    result.append("  push rax")
    return depth + 1


def pop(result: list[str], register: str, depth: int) -> int:
    result.append(f"  pop {register}")
    return depth - 1


def push_number(result: list[str], value: int, depth: int) -> int:
    if imm32_min <= value <= imm32_max:
        result.append(f"  push {value}")
        return depth + 1
    result.append(f"  mov rax, {value}")
    return push(result, depth)


def generate_asm(result: list[str], node: Node, depth: int) -> int:
    match node:
        case NumberNode(value=value):
            return push_number(result, value, depth)
        case BinaryNode(kind=kind, left=left, right=right):
            depth = generate_asm(result, left, depth)
            depth = generate_asm(result, right, depth)
            depth = pop(result, "rdi", depth)
            depth = pop(result, "rax", depth)
            match kind:
                case NodeKind.Add:
                    result.append("  add rax, rdi")
                case NodeKind.Sub:
                    result.append("  sub rax, rdi")
                case NodeKind.Mul:
                    result.append("  imul rax, rdi")
                case NodeKind.Div:
                    result.append("  cqo")
                    result.append("  idiv rdi")
            return push(result, depth)
        case _:
            assert_never(node)


def codegen(node: Node) -> list[str]:
    result = [".intel_syntax noprefix", ".global main", "main:"]
    depth = generate_asm(result, node, 0)
    assert depth == 1
    # the value left on the stack becomes the exit status
    pop(result, "rax", depth)
    result.append("  ret")
    logger.debug("emitted %d lines", len(result))
    return result
