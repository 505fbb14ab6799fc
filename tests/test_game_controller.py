"""
Testing the HTTP endpoints.
"""

from wordgame.config import TestingConfig
from wordgame.models.errors import ExternalFetchError
from wordgame.services.game_service import initialize_game_service


def new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()


def guess(client, game_id, word):
    return client.post(f'/api/game/{game_id}/guess', json={'guess': word})


def test_new_game(client):
    data = new_game(client)
    state = data['state']
    assert data['success']
    assert state['phase'] == 'awaiting_guess'
    assert state['current_row'] == 0
    assert state['word_length'] == 6
    assert state['answer'] is None
    assert len(state['board']['rows']) == 6
    assert state['board']['rows'][0]['enabled']


def test_unknown_game(client):
    response = client.get('/api/game/missing/state')
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Game not found'


def test_wrong_guess_advances_row(client):
    game_id = new_game(client)['game_id']
    response = guess(client, game_id, 'plains')
    data = response.get_json()

    assert response.status_code == 200
    assert [v['state'] for v in data['outcome']['verdicts']] == [
        'inplace', 'inplace', 'inplace', 'wrong', 'correct', 'wrong'
    ]
    assert data['outcome']['prefilled'] == {'0': 'P', '1': 'L', '2': 'A'}
    assert data['state']['current_row'] == 1
    assert data['state']['confirmed_positions'] == [0, 1, 2]
    assert data['state']['answer'] is None


def test_winning_guess_reveals_answer(client):
    game_id = new_game(client)['game_id']
    data = guess(client, game_id, 'PLANET').get_json()
    assert data['state']['won']
    assert data['state']['game_over']
    assert data['state']['answer'] == 'PLANET'
    assert data['state']['board']['message'] == 'You Won! The word was planet'


def test_letters_payload_with_blank_is_rejected(client):
    game_id = new_game(client)['game_id']
    response = client.post(
        f'/api/game/{game_id}/guess', json={'letters': ['P', 'L', '', 'N', 'E', 'T']}
    )
    data = response.get_json()
    assert response.status_code == 400
    assert data['error_type'] == 'RowNotFullError'

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['current_row'] == 0


def test_short_and_long_guesses_rejected(client):
    game_id = new_game(client)['game_id']
    assert guess(client, game_id, 'PLAN').get_json()['error_type'] == 'RowNotFullError'

    response = guess(client, game_id, 'PLANETS')
    assert response.status_code == 400
    assert response.get_json()['error_type'] == 'ValidationError'


def test_missing_guess(client):
    game_id = new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_loss_then_terminal(client):
    game_id = new_game(client)['game_id']
    for _ in range(6):
        data = guess(client, game_id, 'ZZZZZZ').get_json()
    assert data['state']['phase'] == 'lost'
    assert data['state']['answer'] == 'PLANET'

    response = guess(client, game_id, 'PLANET')
    assert response.status_code == 400
    assert response.get_json()['error_type'] == 'GameOverError'


def test_hints(client):
    game_id = new_game(client)['game_id']
    data = client.post(f'/api/game/{game_id}/hint').get_json()
    assert data['outcome'] == {'position': 0, 'letter': 'P', 'hints_used': 1, 'hints_remaining': 2}
    assert data['state']['board']['rows'][0]['cells'][0] == {
        'value': 'P', 'state': 'inplace', 'locked': True
    }

    client.post(f'/api/game/{game_id}/hint')
    client.post(f'/api/game/{game_id}/hint')
    response = client.post(f'/api/game/{game_id}/hint')
    assert response.status_code == 400
    assert response.get_json()['error_type'] == 'HintExhaustedError'


def test_hinted_cells_kept_when_guessing(client):
    game_id = new_game(client)['game_id']
    client.post(f'/api/game/{game_id}/hint')
    # the locked first cell keeps P whatever the payload says there
    data = guess(client, game_id, 'ZLANET').get_json()
    assert data['state']['won']


def test_intent_dispatch(client):
    game_id = new_game(client)['game_id']
    for col, letter in enumerate('PLANET'):
        response = client.post(
            f'/api/game/{game_id}/intent',
            json={'type': 'cell_changed', 'row': 0, 'col': col, 'value': letter}
        )
        assert response.status_code == 200
    state = response.get_json()['state']
    assert state['board']['submit_enabled']

    response = client.post(
        f'/api/game/{game_id}/intent',
        json={'type': 'navigate', 'row': 0, 'col': 3, 'direction': 'backward'}
    )
    assert response.get_json()['state']['board']['focus'] == [0, 2]

    data = client.post(f'/api/game/{game_id}/intent', json={'type': 'submit'}).get_json()
    assert data['outcome']['phase'] == 'won'


def test_intent_validation(client):
    game_id = new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/intent', json={'type': 'dance'})
    assert response.status_code == 400

    response = client.post(f'/api/game/{game_id}/intent', json={'type': 'cell_changed', 'row': 0})
    assert response.status_code == 400
    assert 'col' in response.get_json()['error']

    response = client.post(
        f'/api/game/{game_id}/intent',
        json={'type': 'navigate', 'row': 0, 'col': 1, 'direction': 'sideways'}
    )
    assert response.status_code == 400


def test_restart(client):
    game_id = new_game(client)['game_id']
    guess(client, game_id, 'PLAINS')
    client.post(f'/api/game/{game_id}/hint')

    state = client.post(f'/api/game/{game_id}/restart').get_json()['state']
    assert state['current_row'] == 0
    assert state['hints_used'] == 0
    assert state['confirmed_positions'] == []
    assert state['phase'] == 'awaiting_guess'


def test_delete_game(client):
    game_id = new_game(client)['game_id']
    assert client.delete(f'/api/game/{game_id}').get_json()['success']
    assert client.get(f'/api/game/{game_id}/state').status_code == 404
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_health(client):
    new_game(client)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1


class FailingAnswerSource:
    def fetch_secret(self, length, cancel_event=None):
        raise ExternalFetchError("word API unreachable")


def test_fallback_secret_when_fetch_fails(client):
    initialize_game_service(TestingConfig, FailingAnswerSource())
    game_id = new_game(client)['game_id']
    data = guess(client, game_id, 'wordle').get_json()
    assert data['state']['won']
    assert data['state']['answer'] == TestingConfig.FALLBACK_SECRET
