from datetime import datetime, timedelta, timezone
from pix_residencial.config import SECRET_KEY, ALGORITHM, ACCESS_EXPIRES_MIN
from pix_residencial.log import configurar_logging
from flask import jsonify, request, g
from functools import wraps
import jwt
import logging


configurar_logging()
logger = logging.getLogger(__name__)


br = timezone(timedelta(hours=-3))


def gerar_token(id_usuario: str) -> str:
    '''
    Emite um access token assinado com SECRET_KEY. Usado pelo backend do
    condomínio, que compartilha a mesma chave, para chamar as rotas PIX.
    '''
    agora = datetime.now(br)

    payload = {
        'sub': str(id_usuario),
        'type': 'access',
        'iat': int(agora.timestamp()),
        'exp': int((agora + timedelta(minutes=ACCESS_EXPIRES_MIN)).timestamp())
    }

    token = jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)
    logger.info(f'Access token gerado para usuário {id_usuario}.')
    return token


def validar_token(token: str, token_type: str = 'access'):
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])

        if payload.get('type') != token_type:
            logger.warning('Tipo de token inválido.')
            return {'erro': 'Tipo de token inválido!'}, 401

        return payload, 200

    except jwt.ExpiredSignatureError:
        logger.warning('Token expirou.')
        return {'erro': 'Token expirou!'}, 401

    except jwt.InvalidSignatureError:
        logger.warning('Assinatura inválida no token.')
        return {'erro': 'Assinatura inválida no token!'}, 401

    except jwt.DecodeError:
        logger.warning('Token malformado.')
        return {'erro': 'Token malformado!'}, 401

    except jwt.InvalidTokenError:
        logger.warning('Token inválido.')
        return {'erro': 'Token inválido!'}, 401


def rota_protegida(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        auth = request.headers.get('Authorization')

        if not auth:
            logger.warning('Token não enviado.')
            return jsonify({'erro': 'Token não enviado!'}), 401

        partes = auth.split()

        if len(partes) != 2 or partes[0].lower() != 'bearer':
            logger.warning('Cabeçalho malformado. Use Bearer <token>')
            return jsonify({'erro': 'Cabeçalho malformado! Use Bearer <token>'}), 401

        payload, status = validar_token(partes[1], token_type='access')

        if status != 200:
            return jsonify(payload), status

        g.id_usuario = payload.get('sub')
        return func(*args, **kwargs)
    return wrapper
