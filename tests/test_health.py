"""
Health check and cross-cutting behaviour tests
"""
import json


def test_health(client):
    """Test health check needs no token"""
    response = client.get('/api/health')

    assert response.status_code == 200
    assert json.loads(response.data) == {'status': 'OK', 'message': 'FreshClean API is running'}


def test_request_id_generated(client):
    """Test every response carries a request id"""
    response = client.get('/api/health')

    assert response.headers.get('X-Request-ID')


def test_request_id_echoed(client):
    """Test a client-supplied request id is echoed back"""
    response = client.get('/api/health', headers={'X-Request-ID': 'trace-123'})

    assert response.headers['X-Request-ID'] == 'trace-123'


def test_unknown_route_is_json(client):
    """Test unknown routes answer with a JSON message"""
    response = client.get('/api/nowhere')

    assert response.status_code == 404
    assert 'message' in json.loads(response.data)


def test_cors_allows_frontend_origin(client):
    """Test the configured frontend origin is allowed"""
    response = client.get('/api/health', headers={'Origin': 'http://localhost:5500'})

    assert response.headers.get('Access-Control-Allow-Origin') == 'http://localhost:5500'
