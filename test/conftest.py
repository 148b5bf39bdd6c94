import pytest
from pix_residencial import create_app
from pix_residencial.auth import gerar_token


app = create_app({'TESTING': True, 'RATELIMIT_ENABLED': False})


@pytest.fixture
def client_pix():
    with app.app_context():
        with app.test_client() as client:
            yield client


@pytest.fixture
def auth_header():
    return {'Authorization': f'Bearer {gerar_token(1)}'}


@pytest.fixture
def crc16_referencia():
    return _crc16_referencia


def _crc16_referencia(texto):
    crc = 0xFFFF
    for c in texto:
        crc ^= ord(c) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) & 0xFFFF) ^ 0x1021
            else:
                crc = (crc << 1) & 0xFFFF
    return f'{crc:04X}'
