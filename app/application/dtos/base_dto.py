# app/application/dtos/base_dto.py

"""
Classe base para dtos personalizados.

Este módulo define a classe base CustomBaseModel que estende
o BaseModel do Pydantic com a configuração comum a todos os dtos
da aplicação.
"""

from pydantic import BaseModel, ConfigDict


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    Remove espaços nas bordas de campos texto e permite construir o dto
    a partir de atributos de objetos (modelos de domínio ou ORM).
    """

    model_config = ConfigDict(str_strip_whitespace=True, from_attributes=True)
