"""
Testing keyboard input over Socket.IO.
"""

import pytest

from conftest import SECRET_1, SECRET_2


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


def events(client, name):
    return [event['args'][0] for event in client.get_received() if event['name'] == name]


def press(client, keys):
    for key in keys:
        client.emit('key_press', {'key': key})


def test_connect_sends_round_state(socket_client):
    states = events(socket_client, 'round_state')

    assert len(states) == 1
    assert states[0]['status'] == 'active'


def test_letters_and_backspace(socket_client):
    socket_client.get_received()

    press(socket_client, ['n', 'o', 'x', 'BACKSPACE'])
    states = events(socket_client, 'round_state')

    assert states[-1]['current_guess'] == 'no'


def test_enter_submits_guess(socket_client):
    socket_client.get_received()

    press(socket_client, list('noite') + ['ENTER'])
    states = events(socket_client, 'round_state')

    assert states[-1]['attempts'] == ['noite']
    assert states[-1]['current_row'] == 1


def test_rejected_guess_emits_error(socket_client):
    socket_client.get_received()

    press(socket_client, ['n', 'o', 'ENTER'])
    errors = events(socket_client, 'guess_error')

    assert len(errors) == 1
    assert errors[0]['error_type'] == 'InvalidLengthError'


def test_winning_then_restart(socket_client):
    socket_client.get_received()

    press(socket_client, list(SECRET_1) + ['ENTER'] + list(SECRET_2) + ['ENTER'])
    states = events(socket_client, 'round_state')
    assert states[-1]['status'] == 'won'

    socket_client.emit('restart')
    states = events(socket_client, 'round_state')
    assert states[-1]['status'] == 'active'
    assert states[-1]['attempts'] == []


def test_missing_key_emits_error(socket_client):
    socket_client.get_received()

    socket_client.emit('key_press', {})
    errors = events(socket_client, 'error')

    assert errors == [{'error': 'Key is required'}]
