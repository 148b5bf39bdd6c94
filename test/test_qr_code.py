from unittest.mock import patch, Mock
from pix_residencial.error import ProvedorQrCodeIndisponivel
from pix_residencial.qr_code import gerar_url_qr_code, montar_url_qr_code
import pytest
import requests


PAYLOAD = '00020126330014BR.GOV.BCB.PIX0111123456789015204000053039865406150.506304ABCD'


def resposta_ok():
    resposta = Mock()
    resposta.raise_for_status.return_value = None
    return resposta


def test_montar_url_codifica_payload():
    url = montar_url_qr_code('https://qr.exemplo/?s={tamanho}&d={dados}', 'a b+c/d', 200)

    assert url == 'https://qr.exemplo/?s=200&d=a%20b%2Bc%2Fd'


def test_provedor_principal():
    with patch('pix_residencial.qr_code.requests.get',
               return_value=resposta_ok()) as fake_get:
        url = gerar_url_qr_code(PAYLOAD)

    assert url.startswith('https://api.qrserver.com/')
    assert fake_get.call_count == 1


def test_provedor_reserva_quando_principal_falha():
    with patch('pix_residencial.qr_code.requests.get',
               side_effect=[requests.exceptions.Timeout('lento'),
                            resposta_ok()]) as fake_get:
        url = gerar_url_qr_code(PAYLOAD)

    assert url.startswith('https://quickchart.io/')
    assert fake_get.call_count == 2


def test_provedor_reserva_quando_principal_responde_erro():
    com_erro = Mock()
    com_erro.raise_for_status.side_effect = requests.exceptions.HTTPError('500')

    with patch('pix_residencial.qr_code.requests.get',
               side_effect=[com_erro, resposta_ok()]):
        url = gerar_url_qr_code(PAYLOAD)

    assert url.startswith('https://quickchart.io/')


def test_nenhum_provedor_disponivel():
    with patch('pix_residencial.qr_code.requests.get',
               side_effect=requests.exceptions.ConnectionError('offline')) as fake_get:
        with pytest.raises(ProvedorQrCodeIndisponivel):
            gerar_url_qr_code(PAYLOAD)

    assert fake_get.call_count == 2
