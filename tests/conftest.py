import pytest

MASK = (1 << 64) - 1


def to_signed(value: int) -> int:
    value &= MASK
    return value - (1 << 64) if value >> 63 else value


def execute(lines: list[str]) -> int:
    """
    Run the body of an emitted program on a tiny x86-64 subset.

    Returns the value of rax at ``ret``.
    """
    registers = {"rax": 0, "rdi": 0, "rdx": 0}
    stack = []
    body = lines[lines.index("main:") + 1 :]
    for line in body:
        op, _, operands = line.strip().partition(" ")
        args = [arg.strip() for arg in operands.split(",")] if operands else []
        match op:
            case "push":
                arg = args[0]
                stack.append(registers[arg] if arg in registers else int(arg))
            case "pop":
                registers[args[0]] = stack.pop()
            case "mov":
                registers[args[0]] = int(args[1])
            case "add":
                registers["rax"] = to_signed(registers["rax"] + registers["rdi"])
            case "sub":
                registers["rax"] = to_signed(registers["rax"] - registers["rdi"])
            case "imul":
                registers["rax"] = to_signed(registers["rax"] * registers["rdi"])
            case "cqo":
                registers["rdx"] = -1 if registers["rax"] < 0 else 0
            case "idiv":
                dividend, divisor = registers["rax"], registers["rdi"]
                quotient = abs(dividend) // abs(divisor)
                if (dividend < 0) != (divisor < 0):
                    quotient = -quotient
                registers["rax"] = to_signed(quotient)
                registers["rdx"] = dividend - quotient * divisor
            case "ret":
                assert stack == []
                return registers["rax"]
            case _:
                raise AssertionError(f"unknown instruction: {line}")
    raise AssertionError("program did not return")


@pytest.fixture
def run_asm():
    return execute
