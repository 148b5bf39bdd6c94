from pix_residencial.error import PayloadInvalido, CodificacaoPayloadInvalida
from pix_residencial.gerador_pix import calcular_crc16
from pix_residencial.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def _ler_campos(texto: str):
    campos = []
    posicao = 0

    while posicao < len(texto):
        tag = texto[posicao:posicao + 2]
        tamanho = texto[posicao + 2:posicao + 4]

        if len(tag) < 2 or len(tamanho) < 2 or not tamanho.isdigit():
            raise PayloadInvalido(f'Campo malformado na posição {posicao}.')

        inicio = posicao + 4
        fim = inicio + int(tamanho)

        if fim > len(texto):
            raise PayloadInvalido(f'Campo {tag} truncado na posição {posicao}.')

        campos.append((tag, texto[inicio:fim]))
        posicao = fim

    return campos


def decodificar_payload(payload: str):
    '''
    Separa um payload PIX em pares (tag, valor), na ordem em que aparecem.
    O último campo precisa ser o CRC (tag 63).
    '''
    campos = _ler_campos(payload or '')

    if not campos or campos[-1][0] != '63':
        raise PayloadInvalido('Payload PIX sem campo de CRC no final.')

    return campos


def verificar_payload(payload: str) -> bool:
    if not isinstance(payload, str) or len(payload) < 8:
        return False

    if payload[-8:-4] != '6304':
        return False

    try:
        return calcular_crc16(payload[:-4]) == payload[-4:]
    except CodificacaoPayloadInvalida:
        return False


def extrair_dados(payload: str) -> dict:
    if not verificar_payload(payload):
        logger.warning('CRC do payload PIX não confere.')
        raise PayloadInvalido('CRC do payload PIX não confere!')

    campos = dict(decodificar_payload(payload))
    conta = dict(_ler_campos(campos.get('26', '')))
    adicionais = dict(_ler_campos(campos.get('62', '')))

    return {
        'chave': conta.get('01'),
        'valor': campos.get('54'),
        'nome': campos.get('59'),
        'cidade': campos.get('60'),
        'referencia': adicionais.get('05'),
        'crc': campos['63']
    }
