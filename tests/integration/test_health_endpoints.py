def test_health(client):
    r = client.get('/api/v1/health')
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'ok'
    assert body['environment'] == 'testing'
    assert body['memory']['used'] > 0
    assert body['uptime'] >= 0


def test_detailed_health(client):
    r = client.get('/api/v1/health/detailed')
    assert r.status_code == 200
    body = r.json()
    assert body['status'] == 'ok'
    assert body['services'] == {'api': 'healthy', 'placeRepository': 'healthy', 'discovery': 'healthy'}
    assert body['system']['pythonVersion']
    assert 'total_errors' in body['error_statistics']
