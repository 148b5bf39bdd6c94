from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from pix_residencial.error import (ValorInvalido,
                                   TipoChaveNaoSuportado,
                                   CodificacaoPayloadInvalida,
                                   ChavePixInvalida,
                                   PayloadInvalido)
import crcmod
import re
import unicodedata


class TipoChave(Enum):
    CPF = 'CPF'
    CNPJ = 'CNPJ'
    EMAIL = 'EMAIL'
    TELEFONE = 'TELEFONE'

    @classmethod
    def de_texto(cls, texto):
        if isinstance(texto, cls):
            return texto

        nome = str(texto or '').strip().upper()
        nome = ALIASES_TIPO_CHAVE.get(nome, nome)

        try:
            return cls(nome)
        except ValueError:
            raise TipoChaveNaoSuportado(
                f'Tipo de chave PIX não suportado: {texto}')


ALIASES_TIPO_CHAVE = {
    'PHONE': 'TELEFONE',
    'CELULAR': 'TELEFONE',
    'E-MAIL': 'EMAIL'
}

# (id da conta do recebedor, id do tipo de chave)
IDENTIFICADORES = {
    TipoChave.CPF: ('633', '111'),
    TipoChave.CNPJ: ('636', '114'),
    TipoChave.TELEFONE: ('636', '114'),
    TipoChave.EMAIL: ('642', '120')
}

FORMATO_CHAVE = {
    TipoChave.CPF: re.compile(r'^\d{11}$'),
    TipoChave.CNPJ: re.compile(r'^\d{14}$'),
    TipoChave.EMAIL: re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$'),
    TipoChave.TELEFONE: re.compile(r'^\+?\d{10,14}$')
}

_crc16_ccitt = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)


@dataclass(frozen=True)
class SolicitacaoPagamentoPix:
    tipo_chave: TipoChave
    chave_pix: str
    valor: Decimal
    matricula: str

    def __post_init__(self):
        object.__setattr__(self, 'tipo_chave', TipoChave.de_texto(self.tipo_chave))


def campo_emv(tag, valor):
    if len(valor) > 99:
        raise PayloadInvalido(
            f'Campo {tag} excede 99 caracteres ({len(valor)}).')
    return f"{tag}{len(valor):02d}{valor}"


def calcular_crc16(payload: str) -> str:
    '''
    CRC16/CCITT-FALSE (polinômio 0x1021, início 0xFFFF) em 4 dígitos hex.
    '''
    try:
        dados = payload.encode('ascii')
    except UnicodeEncodeError as erro:
        raise CodificacaoPayloadInvalida(
            f'Payload PIX contém caractere fora do ASCII: {erro.object[erro.start]!r}')

    return f"{_crc16_ccitt(dados):04X}"


def normalizar_identificador(texto: str) -> str:
    decomposto = unicodedata.normalize('NFD', texto or '')
    return ''.join(
        c for c in decomposto
        if not unicodedata.combining(c) and not c.isspace()
    )


def limpar_texto(texto: str) -> str:
    decomposto = unicodedata.normalize('NFD', texto or '')
    sem_acento = ''.join(c for c in decomposto if not unicodedata.combining(c))
    sem_simbolos = re.sub(r'[^\w\s]', '', sem_acento, flags=re.ASCII)
    return re.sub(r'\s+', ' ', sem_simbolos).strip()


def selecionar_identificadores(tipo_chave):
    # CNPJ e TELEFONE compartilham o mesmo par.
    return IDENTIFICADORES[TipoChave.de_texto(tipo_chave)]


def normalizar_chave_telefone(chave: str) -> str:
    digitos = re.sub(r'\D', '', chave or '')

    if digitos.startswith('55'):
        return f'+{digitos}'
    return f'+55{digitos}'


def validar_chave_pix(tipo_chave, chave: str) -> str:
    tipo = TipoChave.de_texto(tipo_chave)
    chave = (chave or '').strip()

    if tipo is TipoChave.TELEFONE:
        chave = re.sub(r'[\s().-]', '', chave)

    if not FORMATO_CHAVE[tipo].match(chave):
        mensagens = {
            TipoChave.CPF: 'CPF deve conter exatamente 11 dígitos numéricos.',
            TipoChave.CNPJ: 'CNPJ deve conter exatamente 14 dígitos numéricos.',
            TipoChave.EMAIL: 'Email inválido.',
            TipoChave.TELEFONE: 'Telefone deve conter entre 10 e 14 dígitos numéricos.'
        }
        raise ChavePixInvalida(mensagens[tipo])

    return chave


def formatar_valor(valor) -> str:
    if isinstance(valor, bool):
        raise ValorInvalido(f'Valor inválido para pagamento PIX: {valor}')

    try:
        valor = Decimal(str(valor))
    except (InvalidOperation, ValueError, TypeError):
        raise ValorInvalido(f'Valor inválido para pagamento PIX: {valor}')

    if not valor.is_finite() or valor < 0:
        raise ValorInvalido(f'Valor inválido para pagamento PIX: {valor}')

    if valor == 0:
        valor = Decimal('0')

    try:
        return str(valor.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise ValorInvalido(f'Valor fora do limite para pagamento PIX: {valor}')


def gerar_codigo_pix(solicitacao: SolicitacaoPagamentoPix) -> str:
    '''
    Gera o código PIX copia e cola compacto usado nas cobranças do
    condomínio. A matrícula e o valor vão no campo de dados adicionais
    como "{matricula}HIST{valor sem ponto}".
    '''
    valor = formatar_valor(solicitacao.valor)
    id_conta, id_tipo = selecionar_identificadores(solicitacao.tipo_chave)

    chave = (solicitacao.chave_pix or '').strip()
    if solicitacao.tipo_chave is TipoChave.TELEFONE:
        chave = normalizar_chave_telefone(chave)

    referencia = (
        normalizar_identificador(solicitacao.matricula) +
        'HIST' +
        valor.replace('.', '')
    )

    payload = (
        '0002012' + id_conta +
        '0014BR.GOV.BCB.PIX0' + id_tipo + chave +
        '5204000053039865406' + valor +
        '5802BR5901N6001C' +
        campo_emv('62', campo_emv('05', referencia)) +
        '6304'
    )

    return payload + calcular_crc16(payload)


def gerar_pix_copia_e_cola(
        tipo_chave,
        chave: str,
        valor,
        nome_recebedor: str,
        cidade: str,
        referencia: str = None
) -> str:
    '''
    Gera payload PIX Cópia e Cola conforme padrão BACEN (EMV-Co),
    com todos os campos em TLV.
    '''
    tipo = TipoChave.de_texto(tipo_chave)
    valor = formatar_valor(valor)

    chave = (chave or '').strip()
    if tipo is TipoChave.TELEFONE:
        chave = normalizar_chave_telefone(chave)

    payload = (
        campo_emv('00', '01') +
        campo_emv('01', '11') +
        campo_emv(
            '26',
            campo_emv('00', 'br.gov.bcb.pix') +
            campo_emv('01', chave)
        ) +
        campo_emv('52', '0000') +
        campo_emv('53', '986')
    )

    if Decimal(valor) > 0:
        payload += campo_emv('54', valor)

    payload += (
        campo_emv('58', 'BR') +
        campo_emv('59', limpar_texto(nome_recebedor)[:25]) +
        campo_emv('60', limpar_texto(cidade)[:15])
    )

    if referencia:
        payload += campo_emv(
            '62', campo_emv('05', normalizar_identificador(referencia)[:25]))

    payload += '6304'
    return payload + calcular_crc16(payload)
