from ledgerkit.contract import Instruction, Opcode
from ledgerkit.gas import GasCalculator


def test_tx_gas():
    calc = GasCalculator()
    assert calc.tx_gas(False) == 21000
    assert calc.tx_gas(True) - calc.tx_gas(False) == 6800


def test_empty_contract_costs_base():
    assert GasCalculator().contract_gas([], False) == 21000


def test_storage_write_adds_cost():
    calc = GasCalculator()
    assert calc.contract_gas([], True) - calc.contract_gas([], False) == 1000


def test_listed_instruction_costs():
    calc = GasCalculator()
    base = calc.contract_gas([], False)
    assert calc.contract_gas([Instruction(Opcode.ADD)], False) - base == 5
    assert calc.contract_gas([Instruction(Opcode.MUL)], False) - base == 8
    assert calc.contract_gas([Instruction(Opcode.LOAD, 0)], False) - base == 10
    assert calc.contract_gas([Instruction(Opcode.CALL, "")], False) - base == 100
    assert calc.contract_gas([Instruction(Opcode.RETURN)], False) - base == 2


def test_unlisted_instructions_cost_default():
    calc = GasCalculator()
    base = calc.contract_gas([], False)
    assert calc.contract_gas([Instruction(Opcode.LOAD, 1)], False) - base == 50
    assert calc.contract_gas([Instruction(Opcode.CALL, "transfer")], False) - base == 50


def test_limit_and_refund():
    calc = GasCalculator()
    assert calc.check_gas_limit(100, 100) is True
    assert calc.check_gas_limit(101, 100) is False
    assert calc.refund(30, 100) == 70
    assert calc.refund(101, 100) == 0