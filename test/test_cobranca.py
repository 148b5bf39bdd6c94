from datetime import date, timedelta
from decimal import Decimal
from pix_residencial.cobranca import calcular_valor_com_juros, dias_em_atraso
from pix_residencial.error import ValorInvalido
import pytest


def test_juros_por_dia_de_atraso():
    vencimento = date(2026, 10, 1)

    total, juros = calcular_valor_com_juros(
        Decimal('100'), vencimento, Decimal('0.1'),
        hoje=vencimento + timedelta(days=10))

    assert total == Decimal('101.00')
    assert juros == Decimal('1.00')


def test_sem_juros_antes_do_vencimento():
    total, juros = calcular_valor_com_juros(
        '350.75', '2026-10-10', '0.33', hoje='2026-10-05')

    assert total == Decimal('350.75')
    assert juros == Decimal('0.00')


def test_sem_juros_no_dia_do_vencimento():
    total, juros = calcular_valor_com_juros(
        350, '2026-10-10', 1, hoje=date(2026, 10, 10))

    assert (total, juros) == (Decimal('350.00'), Decimal('0.00'))


def test_juros_arredondados_em_centavos():
    total, juros = calcular_valor_com_juros(
        '249.00', '2026-09-01', '0.033', hoje='2026-09-04')

    assert juros == Decimal('0.25')
    assert total == Decimal('249.25')


def test_dias_em_atraso():
    assert dias_em_atraso('2026-10-01', '2026-10-19') == 18
    assert dias_em_atraso('2026-10-19', '2026-10-01') == 0


@pytest.mark.parametrize('valor, juros', [(-1, 1), (100, -0.5), ('abc', 1), (100, None)])
def test_valores_invalidos(valor, juros):
    with pytest.raises(ValorInvalido):
        calcular_valor_com_juros(valor, '2026-10-01', juros, hoje='2026-10-02')


def test_data_invalida():
    with pytest.raises(ValorInvalido):
        calcular_valor_com_juros(100, '01/10/2026', 1)


def test_valor_acima_da_precisao_decimal():
    with pytest.raises(ValorInvalido):
        calcular_valor_com_juros(1e30, '2026-10-01', '0.1', hoje='2026-10-11')
