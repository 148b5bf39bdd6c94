from pix_residencial.config import (QR_CODE_PROVIDER,
                                    QR_CODE_FALLBACK,
                                    QR_CODE_TIMEOUT)
from pix_residencial.error import ProvedorQrCodeIndisponivel
from pix_residencial.log import configurar_logging
from urllib.parse import quote
import logging
import requests


configurar_logging()
logger = logging.getLogger(__name__)


def montar_url_qr_code(modelo: str, payload: str, tamanho: int = 300) -> str:
    return modelo.format(tamanho=tamanho, dados=quote(payload, safe=''))


def gerar_url_qr_code(payload: str, tamanho: int = 300) -> str:
    '''
    Retorna a URL da imagem do QR Code. Tenta o provedor principal e,
    se ele falhar, o provedor reserva. Nunca mais de duas tentativas.
    '''
    provedores = [('principal', QR_CODE_PROVIDER),
                  ('reserva', QR_CODE_FALLBACK)]

    for nome, modelo in provedores:
        url = montar_url_qr_code(modelo, payload, tamanho)

        try:
            resposta = requests.get(url, timeout=QR_CODE_TIMEOUT)
            resposta.raise_for_status()
        except requests.RequestException as erro:
            logger.warning(f'Provedor de QR Code {nome} falhou: {str(erro)}')
            continue

        logger.info(f'QR Code gerado pelo provedor {nome}.')
        return url

    logger.error('Nenhum provedor de QR Code disponível.')
    raise ProvedorQrCodeIndisponivel('Serviço de QR Code indisponível!')
