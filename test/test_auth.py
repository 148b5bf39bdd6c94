from datetime import datetime, timedelta, timezone
from pix_residencial.auth import gerar_token, validar_token
from pix_residencial.config import SECRET_KEY, ALGORITHM
import jwt


def test_token_valido():
    payload, status = validar_token(gerar_token(42))

    assert status == 200
    assert payload['sub'] == '42'


def test_token_expirado():
    agora = datetime.now(timezone.utc)
    token = jwt.encode({
        'sub': '1',
        'type': 'access',
        'iat': int((agora - timedelta(hours=2)).timestamp()),
        'exp': int((agora - timedelta(hours=1)).timestamp())
    }, SECRET_KEY, algorithm=ALGORITHM)

    resposta, status = validar_token(token)

    assert status == 401
    assert resposta['erro'] == 'Token expirou!'


def test_token_assinatura_invalida():
    token = jwt.encode({'sub': '1', 'type': 'access'},
                       'outra-chave-com-tamanho-suficiente', algorithm=ALGORITHM)

    _, status = validar_token(token)

    assert status == 401


def test_token_tipo_errado():
    token = jwt.encode({'sub': '1', 'type': 'refresh'}, SECRET_KEY, algorithm=ALGORITHM)

    resposta, status = validar_token(token)

    assert status == 401
    assert resposta['erro'] == 'Tipo de token inválido!'


def test_token_malformado():
    _, status = validar_token('nao-e-um-jwt')

    assert status == 401


def test_rota_sem_token(client_pix):
    resp = client_pix.post('/pix/codigo', json={})

    assert resp.status_code == 401
    assert resp.json['erro'] == 'Token não enviado!'


def test_rota_cabecalho_malformado(client_pix):
    resp = client_pix.post('/pix/codigo', json={},
                           headers={'Authorization': 'Token abc'})

    assert resp.status_code == 401
