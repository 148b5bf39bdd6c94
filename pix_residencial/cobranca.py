from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pix_residencial.error import ValorInvalido
from pix_residencial.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


br = timezone(timedelta(hours=-3))

CENTAVOS = Decimal('0.01')


def _para_decimal(valor, campo):
    try:
        numero = Decimal(str(valor))
    except (InvalidOperation, ValueError, TypeError):
        raise ValorInvalido(f'Valor inválido para {campo}: {valor}')

    if not numero.is_finite() or numero < 0:
        raise ValorInvalido(f'Valor inválido para {campo}: {valor}')

    return numero


def _para_data(valor, campo):
    if isinstance(valor, datetime):
        return valor.date()

    if isinstance(valor, date):
        return valor

    try:
        return datetime.strptime(str(valor).strip(), '%Y-%m-%d').date()
    except ValueError:
        raise ValorInvalido(f'Data inválida para {campo}: {valor}')


def dias_em_atraso(vencimento, hoje=None) -> int:
    vencimento = _para_data(vencimento, 'vencimento')
    hoje = _para_data(hoje, 'hoje') if hoje is not None else datetime.now(br).date()

    return max(0, (hoje - vencimento).days)


def calcular_valor_com_juros(valor, vencimento, juros_ao_dia, hoje=None):
    '''
    Aplica juros simples por dia de atraso sobre uma cobrança do condomínio.
    Retorna (valor_total, juros), ambos arredondados em centavos.
    '''
    valor = _para_decimal(valor, 'valor')
    taxa = _para_decimal(juros_ao_dia, 'juros_ao_dia')
    dias = dias_em_atraso(vencimento, hoje)

    try:
        juros = (valor * taxa / Decimal(100) * dias).quantize(
            CENTAVOS, rounding=ROUND_HALF_UP)
        total = (valor + juros).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValorInvalido(f'Valor fora do limite para cobrança: {valor}')

    if dias:
        logger.info(f'Cobrança com {dias} dia(s) de atraso, juros de {juros}.')

    return total, juros
