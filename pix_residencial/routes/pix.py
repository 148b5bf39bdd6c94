from flask import Blueprint, jsonify
from pix_residencial.auth import rota_protegida
from pix_residencial.cobranca import calcular_valor_com_juros
from pix_residencial.error import ErroPix
from pix_residencial.gerador_pix import (SolicitacaoPagamentoPix,
                                         formatar_valor,
                                         gerar_codigo_pix,
                                         gerar_pix_copia_e_cola,
                                         validar_chave_pix)
from pix_residencial.leitor_pix import extrair_dados, verificar_payload
from pix_residencial.limitador import limiter
from pix_residencial.log import configurar_logging
from pix_residencial.qr_code import gerar_url_qr_code
from pix_residencial.validation import (validar_json,
                                        campos_faltando,
                                        resposta_campos_faltando)
import logging


configurar_logging()
logger = logging.getLogger(__name__)


pix_bp = Blueprint('pix', __name__)


@pix_bp.route('/codigo', methods=['POST'])
@limiter.limit('100 per hour')
@rota_protegida
def gerar_codigo():
    try:
        logger.info('Gerando código PIX da cobrança...')

        dados = validar_json()
        if isinstance(dados, tuple):
            return dados

        faltando = campos_faltando(
            dados, ['tipo_chave', 'chave_pix', 'valor', 'matricula'])
        if faltando:
            return resposta_campos_faltando(faltando)

        chave = validar_chave_pix(dados['tipo_chave'], str(dados['chave_pix']))

        solicitacao = SolicitacaoPagamentoPix(
            tipo_chave=dados['tipo_chave'],
            chave_pix=chave,
            valor=dados['valor'],
            matricula=str(dados['matricula'])
        )
        payload = gerar_codigo_pix(solicitacao)

        logger.info(f"Código PIX gerado para matrícula {dados['matricula']}.")
        return jsonify({'payload': payload, 'crc': payload[-4:]}), 201

    except ErroPix:
        raise

    except Exception as erro:
        logger.error(f'Erro inesperado ao gerar código PIX: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao gerar código PIX!'}), 500


@pix_bp.route('/copia-e-cola', methods=['POST'])
@limiter.limit('100 per hour')
@rota_protegida
def gerar_copia_e_cola():
    try:
        logger.info('Gerando PIX copia e cola...')

        dados = validar_json()
        if isinstance(dados, tuple):
            return dados

        faltando = campos_faltando(
            dados, ['tipo_chave', 'chave_pix', 'valor', 'nome_recebedor', 'cidade'])
        if faltando:
            return resposta_campos_faltando(faltando)

        chave = validar_chave_pix(dados['tipo_chave'], str(dados['chave_pix']))

        payload = gerar_pix_copia_e_cola(
            dados['tipo_chave'],
            chave,
            dados['valor'],
            str(dados['nome_recebedor']),
            str(dados['cidade']),
            referencia=dados.get('referencia')
        )

        logger.info('PIX copia e cola gerado com sucesso.')
        return jsonify({'payload': payload, 'crc': payload[-4:]}), 201

    except ErroPix:
        raise

    except Exception as erro:
        logger.error(f'Erro inesperado ao gerar PIX copia e cola: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao gerar PIX copia e cola!'}), 500


@pix_bp.route('/cobranca', methods=['POST'])
@limiter.limit('100 per hour')
@rota_protegida
def gerar_cobranca():
    try:
        logger.info('Gerando PIX de cobrança com juros...')

        dados = validar_json()
        if isinstance(dados, tuple):
            return dados

        faltando = campos_faltando(
            dados, ['tipo_chave', 'chave_pix', 'valor', 'vencimento',
                    'juros_ao_dia', 'matricula'])
        if faltando:
            return resposta_campos_faltando(faltando)

        chave = validar_chave_pix(dados['tipo_chave'], str(dados['chave_pix']))

        total, juros = calcular_valor_com_juros(
            dados['valor'], dados['vencimento'], dados['juros_ao_dia'])

        payload = gerar_codigo_pix(SolicitacaoPagamentoPix(
            tipo_chave=dados['tipo_chave'],
            chave_pix=chave,
            valor=total,
            matricula=str(dados['matricula'])
        ))

        logger.info(f"Cobrança PIX gerada para matrícula {dados['matricula']}.")
        return jsonify({
            'payload': payload,
            'valor_original': formatar_valor(dados['valor']),
            'juros': str(juros),
            'valor_total': str(total)
        }), 201

    except ErroPix:
        raise

    except Exception as erro:
        logger.error(f'Erro inesperado ao gerar cobrança PIX: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao gerar cobrança PIX!'}), 500


@pix_bp.route('/verificar', methods=['POST'])
@limiter.limit('100 per hour')
@rota_protegida
def verificar():
    try:
        dados = validar_json()
        if isinstance(dados, tuple):
            return dados

        faltando = campos_faltando(dados, ['payload'])
        if faltando:
            return resposta_campos_faltando(faltando)

        payload = str(dados['payload']).strip()

        if not verificar_payload(payload):
            logger.warning('Payload PIX com CRC inválido.')
            return jsonify({'valido': False}), 200

        try:
            campos = extrair_dados(payload)
        except ErroPix as erro:
            logger.warning(f'CRC válido, mas campos ilegíveis: {erro.mensagem}')
            return jsonify({'valido': True}), 200

        logger.info('Payload PIX verificado com sucesso.')
        return jsonify({'valido': True, 'campos': campos}), 200

    except Exception as erro:
        logger.error(f'Erro inesperado ao verificar payload PIX: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao verificar payload PIX!'}), 500


@pix_bp.route('/qrcode', methods=['POST'])
@limiter.limit('100 per hour')
@rota_protegida
def gerar_qrcode():
    try:
        dados = validar_json()
        if isinstance(dados, tuple):
            return dados

        faltando = campos_faltando(dados, ['payload'])
        if faltando:
            return resposta_campos_faltando(faltando)

        url = gerar_url_qr_code(str(dados['payload']).strip())
        return jsonify({'url': url}), 200

    except ErroPix:
        raise

    except Exception as erro:
        logger.error(f'Erro inesperado ao gerar QR Code: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado ao gerar QR Code!'}), 500
