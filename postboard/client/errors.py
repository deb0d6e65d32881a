class ClientError(Exception):
    """Classe base para falhas ao falar com a API do Postboard."""


class TransportError(ClientError):
    """A requisição não obteve resposta (conexão recusada, timeout...)."""


class DecodeError(ClientError):
    """O corpo da resposta não é JSON ou não tem o formato esperado."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body
