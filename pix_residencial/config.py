import os


SECRET_KEY = os.environ.get('PIX_SECRET_KEY', 'troque-esta-chave-secreta-em-producao')
ALGORITHM = 'HS256'
ACCESS_EXPIRES_MIN = int(os.environ.get('PIX_ACCESS_EXPIRES_MIN', 30))

LOG_DIR = os.environ.get('PIX_LOG_DIR', 'logs')

QR_CODE_PROVIDER = os.environ.get(
    'PIX_QR_CODE_PROVIDER',
    'https://api.qrserver.com/v1/create-qr-code/?size={tamanho}x{tamanho}&data={dados}'
)
QR_CODE_FALLBACK = os.environ.get(
    'PIX_QR_CODE_FALLBACK',
    'https://quickchart.io/qr?size={tamanho}&text={dados}'
)
QR_CODE_TIMEOUT = float(os.environ.get('PIX_QR_CODE_TIMEOUT', 5))

LIMITE_PADRAO = os.environ.get('PIX_LIMITE_PADRAO', '100 per hour')
