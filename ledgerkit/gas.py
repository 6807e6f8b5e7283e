"""Gas accounting for transactions and contract execution."""

from __future__ import annotations

from collections.abc import Iterable

from ledgerkit.contract import Instruction, Opcode

BASE_GAS = 21000
DATA_GAS = 6800
STORAGE_GAS = 1000
DEFAULT_INSTRUCTION_GAS = 50


class GasCalculator:
    """Charges a base fee plus per-instruction and storage costs."""

    def __init__(self) -> None:
        self.base_gas = BASE_GAS
        self.storage_cost = STORAGE_GAS
        self.instruction_cost: dict[Instruction, int] = {
            Instruction(Opcode.LOAD, 0): 10,
            Instruction(Opcode.STORE, 0): 20,
            Instruction(Opcode.ADD): 5,
            Instruction(Opcode.SUB): 5,
            Instruction(Opcode.MUL): 8,
            Instruction(Opcode.DIV): 10,
            Instruction(Opcode.CALL, ""): 100,
            Instruction(Opcode.RETURN): 2,
        }

    def tx_gas(self, has_data: bool) -> int:
        """Gas for a plain transaction, more when it carries data."""
        return self.base_gas + DATA_GAS if has_data else self.base_gas

    def contract_gas(self, instructions: Iterable[Instruction], storage_write: bool) -> int:
        """Gas for running ``instructions``; unlisted instructions cost the default."""
        gas = self.base_gas + sum(
            self.instruction_cost.get(ins, DEFAULT_INSTRUCTION_GAS) for ins in instructions
        )
        if storage_write:
            gas += self.storage_cost
        return gas

    def check_gas_limit(self, gas_used: int, gas_limit: int) -> bool:
        """Whether ``gas_used`` fits within ``gas_limit``."""
        return gas_used <= gas_limit

    def refund(self, gas_used: int, gas_limit: int) -> int:
        """Unused gas, or zero when the limit was exceeded."""
        return 0 if gas_used > gas_limit else gas_limit - gas_used