"""Interactive menu for the print system."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, TextIO

from printqueue.history import PrintHistory
from printqueue.print_queue import PrintQueue
from printqueue.printing import EmptyQueueError, create_job, perform_print, submit_job
from printqueue.stats import compute_statistics, format_statistics
from printqueue.users import UserRegistry

MENU = (
    "\n--- MENU SISTEMA DE IMPRESSAO ---\n"
    "1. Cadastrar usuario\n"
    "2. Cadastrar solicitacao de impressao\n"
    "3. Executar impressao\n"
    "4. Mostrar fila de espera\n"
    "5. Mostrar historico de impressoes\n"
    "6. Estatisticas\n"
    "7. Sair\n"
    "Escolha uma opcao: "
)

_EXIT_OPTION = 7


class _EndOfInput(Exception):
    """Input ran out before the user chose to exit."""


class PrintSystem:
    """Users, queue and history driven by menu commands."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.users = UserRegistry()
        self.queue = PrintQueue()
        self.history = PrintHistory()
        self._output = output
        self._lines: Iterable[str] = iter(())

    def run(self, lines: Iterable[str]) -> None:
        """Process menu input from ``lines`` until exit or end of input."""
        self._lines = iter(lines)
        handlers = {
            1: self._register_user,
            2: self._request_print,
            3: self._execute_print,
            4: lambda: self._write(self.queue.format()),
            5: lambda: self._write(self.history.format()),
            6: lambda: self._write(format_statistics(compute_statistics(self.history))),
        }
        try:
            while True:
                self._write(MENU)
                option = self._read_int()
                if option == _EXIT_OPTION:
                    self._write("Encerrando o sistema...\n")
                    return
                handler = handlers.get(option)
                if handler is None:
                    self._write("Opcao inválida. Tente novamente.\n")
                else:
                    handler()
        except _EndOfInput:
            return

    def _write(self, text: str) -> None:
        (self._output if self._output is not None else sys.stdout).write(text)

    def _read_line(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise _EndOfInput from None
        return line.rstrip("\r\n")

    def _read_int(self) -> Optional[int]:
        try:
            return int(self._read_line().strip())
        except ValueError:
            return None

    def _register_user(self) -> None:
        self._write("Nome: ")
        name = self._read_line()
        self._write("CPF: ")
        cpf = self._read_int()
        self._write("Tipo (1=Estudante, 2=Professor, 3=Administracao/Direcao): ")
        user_type = self._read_int()
        if cpf is None or user_type is None:
            self._write("Erro ao adicionar usuario.\n")
            return
        try:
            self.users.add(name, cpf, user_type)
        except ValueError:
            self._write("Erro ao adicionar usuario.\n")
            return
        self._write("Usuario adicionado com sucesso.\n")

    def _request_print(self) -> None:
        self._write("CPF do usuario: ")
        cpf = self._read_int()
        user = self.users.find_by_cpf(cpf) if cpf is not None else None
        if user is None:
            self._write("Usuario nao encontrado.\n")
            return
        self._write("Numero de paginas: ")
        pages = self._read_int()
        if pages is None:
            self._write("Numero de paginas invalido.\n")
            return
        submit_job(create_job(user, pages), self.queue)
        self._write("Solicitacao adicionada a fila.\n")

    def _execute_print(self) -> None:
        try:
            job = perform_print(self.history, self.queue)
        except EmptyQueueError:
            self._write("\nErro: Fila vazia.\n")
            return
        self._write(
            f"\nImprimindo {job.pages} paginas para {job.user.name} (CPF: {job.user.cpf}).\n"
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive print system on standard input."""
    parser = argparse.ArgumentParser(description="Print queue management system.")
    parser.parse_args(argv)
    PrintSystem(sys.stdout).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())