from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
from pix_residencial.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


class ErroPix(Exception):
    '''
    Erro de domínio do gerador PIX, com mensagem e status HTTP.
    '''
    status = 400

    def __init__(self, mensagem):
        super().__init__(mensagem)
        self.mensagem = mensagem


class ValorInvalido(ErroPix):
    status = 422


class TipoChaveNaoSuportado(ErroPix):
    status = 400


class CodificacaoPayloadInvalida(ErroPix):
    status = 422


class ChavePixInvalida(ErroPix):
    status = 422


class PayloadInvalido(ErroPix):
    status = 422


class ProvedorQrCodeIndisponivel(ErroPix):
    status = 503


def register_erro_handlers(app):
    @app.errorhandler(ErroPix)
    def erro_pix(erro):
        if erro.status >= 500:
            logger.error(f'Falha ao processar PIX: {erro.mensagem}')
        else:
            logger.warning(f'Dados PIX rejeitados: {erro.mensagem}')
        return jsonify({'erro': erro.mensagem}), erro.status

    @app.errorhandler(404)
    def rota_nao_encontrado(erro):
        logger.warning(f'Rota não encontrada: {str(erro)}')
        return jsonify({'erro': 'Rota não encontrada!'}), 404

    @app.errorhandler(401)
    def rota_nao_autorizado(erro):
        logger.warning(f'Rota não autorizada: {str(erro)}')
        return jsonify({'erro': 'Rota não autorizada!'}), 401

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT excedido | IP={request.remote_addr} | rota={request.path}"
        )
        return jsonify({
            'erro': 'Muitas requisições. Tente novamente mais tarde.'
        }), 429

    @app.errorhandler(400)
    def dados_invalidos(erro):
        logger.warning(f'Dados inválidos na rota: {str(erro)}')
        return jsonify({'erro': 'Dados inválidos na rota!'}), 400

    @app.errorhandler(405)
    def metodo_errado(erro):
        logger.warning(f'Método HTTP não permitido nesta rota: {str(erro)}')
        return jsonify({'erro': 'Método HTTP não permitido nesta rota!'}), 405

    @app.errorhandler(422)
    def logica_errada(erro):
        logger.warning(f'Dados corretos, mas lógica errada: {str(erro)}')
        return jsonify({'erro': 'Dados corretos, mas lógica errada!'}), 422

    @app.errorhandler(500)
    def erro_interno(erro):
        logger.error(f'Erro inesperado ao acessar a rota: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao acessar a rota!'}), 500
