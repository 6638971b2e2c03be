"""Facade pattern: one call drives several subsystems."""

from __future__ import annotations


class PreAssembler:
    def operate(self) -> str:
        message = "pre-assembling..."
        print(message)
        return message


class Assembler:
    def assemble(self) -> str:
        message = "assembling..."
        print(message)
        return message


class Tester:
    def test(self) -> bool:
        print("testing...")
        return True


class Facade:
    """Runs pre-assembly, assembly and testing in order."""

    def produce(self) -> bool:
        pre_assembler = PreAssembler()
        assembler = Assembler()
        tester = Tester()
        pre_assembler.operate()
        assembler.assemble()
        return tester.test()