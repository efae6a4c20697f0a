# app/shared/utils/input_validation.py

import re
from typing import Optional, Tuple, Union


class InputValidator:
    """
    Classe para validação e sanitização de entradas do usuário,
    complementando as validações do Pydantic.
    """

    # Constantes para limites
    MAX_NAME_LENGTH = 50  # Mesmo tamanho da coluna nome
    MAX_CPF_DIGITS = 11

    # Caracteres de máscara aceitos na digitação do CPF
    CPF_MASK_CHARS = (".", "-", "/", " ")
    CPF_PATTERN = re.compile(r'^\d+$')

    @classmethod
    def validate_name(cls, name: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Valida o nome de um cliente.

        Args:
            name: String a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not name or not name.strip():
            return False, "Nome não pode estar vazio"

        if len(name) > cls.MAX_NAME_LENGTH:
            return False, f"Nome é muito longo (máximo {cls.MAX_NAME_LENGTH} caracteres)"

        return True, None

    @classmethod
    def sanitize_name(cls, name: str) -> str:
        """
        Sanitiza um nome removendo espaços extras.

        Args:
            name: String a ser sanitizada

        Returns:
            String sanitizada
        """
        # Remove espaços no início e fim e reduz múltiplos espaços internos
        return re.sub(r'\s+', ' ', name.strip())

    @staticmethod
    def strip_patterns(value: str, *patterns: str) -> str:
        """
        Remove todas as ocorrências dos padrões informados.

        Example:
            ```python
            InputValidator.strip_patterns("123.456.789-09", ".", "-")  # "12345678909"
            ```
        """
        result = value
        for pattern in patterns:
            result = result.replace(pattern, "")
        return result

    @classmethod
    def parse_cpf(cls, value: Union[int, str]) -> int:
        """
        Converte um CPF, com ou sem máscara, para inteiro.

        Args:
            value: CPF como inteiro ou texto (ex: "123.456.789-09")

        Returns:
            CPF numérico

        Raises:
            ValueError: Se o valor não for um CPF numérico válido
        """
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError("CPF deve ser numérico")

        if isinstance(value, int):
            digits = str(value)
        else:
            digits = cls.strip_patterns(str(value).strip(), *cls.CPF_MASK_CHARS)

        if not cls.CPF_PATTERN.match(digits):
            raise ValueError("CPF deve conter apenas dígitos")

        if len(digits) > cls.MAX_CPF_DIGITS:
            raise ValueError(f"CPF deve ter no máximo {cls.MAX_CPF_DIGITS} dígitos")

        cpf = int(digits)
        if cpf <= 0:
            raise ValueError("CPF deve ser positivo")
        return cpf
