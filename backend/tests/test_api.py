def _create_session(client, **body):
    payload = {'player_name': 'Aisha'}
    payload.update(body)
    res = client.post('/api/sessions', json=payload)
    assert res.status_code == 201
    return res.get_json()


def test_index_and_health(client):
    assert client.get('/').status_code == 200
    res = client.get('/api/health')
    assert res.status_code == 200
    assert res.get_json()['status'] == 'ok'


def test_create_session_defaults(client):
    session = _create_session(client)
    assert session['current_level'] == 1
    assert session['lives_remaining'] == 3
    assert session['current_score'] == 0
    assert session['is_active'] is True
    assert session['session_end'] is None


def test_create_session_ignores_client_score_and_active(client):
    session = _create_session(client, current_score=999, is_active=False, current_level=2, lives_remaining=4)
    assert session['current_score'] == 0
    assert session['is_active'] is True
    assert session['current_level'] == 2
    assert session['lives_remaining'] == 4


def test_create_session_requires_player_name(client):
    res = client.post('/api/sessions', json={'player_name': ''})
    assert res.status_code == 400
    assert 'player_name' in res.get_json()['error']
    res = client.post('/api/sessions', data='not json', content_type='text/plain')
    assert res.status_code == 400


def test_get_session(client):
    session = _create_session(client)
    res = client.get(f"/api/sessions/{session['id']}")
    assert res.status_code == 200
    assert res.get_json()['player_name'] == 'Aisha'
    assert client.get('/api/sessions/999').status_code == 404


def test_update_session_partial_and_end(client):
    session = _create_session(client)
    res = client.patch(f"/api/sessions/{session['id']}", json={'lives_remaining': 1})
    assert res.status_code == 200
    body = res.get_json()
    assert body['lives_remaining'] == 1
    assert body['current_level'] == 1

    res = client.patch(f"/api/sessions/{session['id']}", json={'is_active': False})
    body = res.get_json()
    assert body['is_active'] is False
    assert body['session_end'] is not None


def test_update_session_errors(client):
    res = client.patch('/api/sessions/999', json={'current_level': 2})
    assert res.status_code == 404
    assert 'not found' in res.get_json()['error']
    session = _create_session(client)
    res = client.patch(f"/api/sessions/{session['id']}", json={'lives_remaining': 'three'})
    assert res.status_code == 400


def test_answer_flow_and_progress(client, quiz):
    question_id = quiz['question'].id
    session = _create_session(client, current_level=1, lives_remaining=3)
    sid = session['id']

    res = client.post(f'/api/sessions/{sid}/answers', json={
        'question_id': question_id, 'selected_answer': 'Alif', 'time_taken_seconds': 1.5,
    })
    assert res.status_code == 201
    answer = res.get_json()
    assert answer['is_correct'] is True
    assert answer['points_earned'] == 15
    assert answer['time_taken_seconds'] == 1.5
    assert client.get(f'/api/sessions/{sid}').get_json()['current_score'] == 15

    res = client.post(f'/api/sessions/{sid}/answers', json={
        'question_id': question_id, 'selected_answer': 'Ba', 'time_taken_seconds': 2,
    })
    assert res.get_json()['points_earned'] == -2
    assert client.get(f'/api/sessions/{sid}').get_json()['current_score'] == 13

    progress = client.get(f'/api/sessions/{sid}/progress').get_json()
    assert progress['total_questions'] == 2
    assert progress['correct_answers'] == 1
    assert progress['completion_percentage'] == 40
    assert progress['average_time_per_question'] == 1.5
    assert [a['selected_answer'] for a in progress['recent_answers']] == ['Ba', 'Alif']
    assert client.get('/api/sessions/999/progress').status_code == 404


def test_submit_answer_errors(client, quiz):
    question_id = quiz['question'].id
    body = {'question_id': question_id, 'selected_answer': 'Alif', 'time_taken_seconds': 1}

    res = client.post('/api/sessions/999/answers', json=body)
    assert res.status_code == 404
    assert 'session' in res.get_json()['error'].lower()

    session = _create_session(client)
    client.patch(f"/api/sessions/{session['id']}", json={'is_active': False})
    res = client.post(f"/api/sessions/{session['id']}/answers", json=body)
    assert res.status_code == 409
    assert 'not active' in res.get_json()['error']

    active = _create_session(client)
    res = client.post(f"/api/sessions/{active['id']}/answers", json=dict(body, question_id=999))
    assert res.status_code == 404
    res = client.post(f"/api/sessions/{active['id']}/answers", json=dict(body, time_taken_seconds=0))
    assert res.status_code == 400
    res = client.post(f"/api/sessions/{active['id']}/answers", json=dict(body, time_taken_seconds=1e20))
    assert res.status_code == 400
    assert 'time_taken_seconds' in res.get_json()['error']
    assert client.get(f"/api/sessions/{active['id']}/progress").get_json()['total_questions'] == 0
    res = client.post(f"/api/sessions/{active['id']}/answers", json={'selected_answer': 'Alif', 'time_taken_seconds': 1})
    assert res.status_code == 400


def test_content_endpoints(client, seeded):
    levels = client.get('/api/levels').get_json()
    assert [lvl['level_number'] for lvl in levels] == [1, 2, 3, 4]
    assert client.get('/api/levels/1').get_json()['name'] == 'First Letters'
    assert client.get('/api/levels/42').status_code == 404

    letters = client.get('/api/letters').get_json()
    assert len(letters) == 28
    assert letters[0]['name'] == 'Alif'
    assert [ltr['level'] for ltr in letters] == sorted(ltr['level'] for ltr in letters)
    level_two = client.get('/api/levels/2/letters').get_json()
    assert len(level_two) == 7
    assert all(ltr['level'] == 2 for ltr in level_two)


def test_questions_endpoint(client, seeded):
    level_id = client.get('/api/levels/1').get_json()['id']
    questions = client.get(f'/api/questions?level_id={level_id}').get_json()
    assert len(questions) == 10
    assert all(q['level_id'] == level_id for q in questions)

    auditory = client.get(f'/api/questions?level_id={level_id}&type=auditory_identification&limit=20').get_json()
    assert len(auditory) == 7
    assert all(q['correct_answer'] in q['options'] for q in auditory)

    assert client.get('/api/questions').status_code == 400
    assert client.get(f'/api/questions?level_id={level_id}&limit=x').status_code == 400
    assert client.get(f'/api/questions?level_id={level_id}&type=bogus').status_code == 400
