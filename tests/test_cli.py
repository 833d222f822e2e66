import io

from printqueue.cli import MENU, PrintSystem, main


def _run(lines):
    output = io.StringIO()
    system = PrintSystem(output)
    system.run(lines)
    return system, output.getvalue()


def test_full_session_prints_job():
    system, text = _run(["1", "Ana", "123", "1", "2", "123", "3", "3", "7"])
    assert "Usuario adicionado com sucesso.\n" in text
    assert "Solicitacao adicionada a fila.\n" in text
    assert "\nImprimindo 3 paginas para Ana (CPF: 123).\n" in text
    assert text.endswith("Encerrando o sistema...\n")
    assert len(system.history) == 1
    assert len(system.queue) == 0


def test_unknown_user_request():
    system, text = _run(["2", "999", "7"])
    assert "Usuario nao encontrado.\n" in text
    assert len(system.queue) == 0


def test_invalid_option():
    _, text = _run(["9", "7"])
    assert "Opcao inválida. Tente novamente.\n" in text


def test_execute_with_empty_queue():
    _, text = _run(["3", "7"])
    assert "\nErro: Fila vazia.\n" in text


def test_invalid_user_type_is_rejected():
    system, text = _run(["1", "Bob", "5", "9", "7"])
    assert "Erro ao adicionar usuario.\n" in text
    assert len(system.users) == 0


def test_end_of_input_stops_loop():
    _, text = _run(["4"])
    assert text == MENU + "proximo --> " + MENU


def test_statistics_option():
    _, text = _run(["6", "7"])
    assert "\n--- Estatisticas ---\n" in text
    assert "Estudantes: N/A\n" in text


def test_history_lists_printed_job():
    _, text = _run(["1", "Ana", "123", "2", "2", "123", "4", "3", "5", "7"])
    assert "proximo -->Ana NumeroFolhas:4 \n" in text


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 0
    assert "Encerrando o sistema...\n" in capsys.readouterr().out