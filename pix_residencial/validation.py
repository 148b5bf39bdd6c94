from flask import jsonify, request
from pix_residencial.log import configurar_logging
from werkzeug.exceptions import BadRequest
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def validar_json():
    try:
        if not request.is_json:
            logger.warning('Requisição deve ser Content-type: application/json.')
            return jsonify(
                {'erro': 'Requisição deve ser Content-type: application/json!'}), 400

        dados = request.get_json()
        if not dados or not isinstance(dados, dict):
            logger.warning('Dados ausentes ou inválidos no corpo da requisição.')
            return jsonify(
                {'erro': 'Dados ausentes ou inválidos no corpo da requisição!'}), 400

        return dados
    except BadRequest:
        logger.warning('JSON malformado! Dados inválidos no corpo da requisição.')
        return jsonify({'erro': 'JSON malformado. Dados inválidos!'}), 400


def campos_faltando(dados: dict, campos):
    return [c for c in campos
            if c not in dados or dados[c] is None or str(dados[c]).strip() == '']


def resposta_campos_faltando(faltando):
    logger.warning(f"Campo obrigatório: {', '.join(faltando)}")
    return jsonify({'erro': f"Campo obrigatório: {', '.join(faltando)}"}), 400
