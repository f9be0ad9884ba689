# src/atlas_compose/core/config/settings.py
"""
Settings tipados do engine de options.

Este módulo define o `EngineSettings`, o objeto imutável que controla as
políticas do engine que não são derivadas das definições de componentes:

    - production: suprime os diagnósticos de forma/nome/asset ausente,
      exatamente onde o engine os condiciona a builds de desenvolvimento
    - reserved_tags: nomes (minúsculos) que não podem ser usados como id
      de componente (por padrão, elementos HTML e SVG)
    - strategies: estratégias adicionais por campo (nome do `StrategyKind`)

Decisões arquiteturais:
    - Settings são validados na construção; valores inválidos são fatais
    - Chaves ausentes assumem os valores de `DEFAULT_SETTINGS`
    - Estratégias CUSTOM não podem ser declaradas em arquivo
      (exigem um callable, registrado via `StrategyRegistry`)

Invariantes:
    - Uma instância de `EngineSettings` nunca é alterada após criada
    - `reserved_tags` contém apenas nomes em minúsculas

Limites explícitos:
    - Não carrega arquivos (ver `loader`)
    - Não constrói a tabela de estratégias (ver `options.registry`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping

from ..options.types import StrategyKind
from .errors import InvalidSettingValueError, UnknownSettingError


HTML_TAGS = (
    "html,body,base,head,link,meta,style,title,"
    "address,article,aside,footer,header,h1,h2,h3,h4,h5,h6,hgroup,nav,section,"
    "div,dd,dl,dt,figcaption,figure,picture,hr,img,li,main,ol,p,pre,ul,"
    "a,b,abbr,bdi,bdo,br,cite,code,data,dfn,em,i,kbd,mark,q,rp,rt,rtc,ruby,"
    "s,samp,small,span,strong,sub,sup,time,u,var,wbr,area,audio,map,track,video,"
    "embed,object,param,source,canvas,script,noscript,del,ins,"
    "caption,col,colgroup,table,thead,tbody,td,th,tr,"
    "button,datalist,fieldset,form,input,label,legend,meter,optgroup,option,"
    "output,progress,select,textarea,"
    "details,dialog,menu,menuitem,summary,"
    "content,element,shadow,template,blockquote,iframe,tfoot"
).split(",")

SVG_TAGS = (
    "svg,animate,circle,clippath,cursor,defs,desc,ellipse,filter,font-face,"
    "foreignobject,g,glyph,image,line,marker,mask,missing-glyph,path,pattern,"
    "polygon,polyline,rect,switch,symbol,text,textpath,tspan,use,view"
).split(",")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "production": False,
    "reserved_tags": HTML_TAGS + SVG_TAGS,
    "strategies": {},
}

_KNOWN_KEYS = frozenset(DEFAULT_SETTINGS)
_FILE_STRATEGY_KINDS = frozenset(k.value for k in StrategyKind if k is not StrategyKind.CUSTOM)


@dataclass(frozen=True)
class EngineSettings:
    """Settings imutáveis do engine (ver docstring do módulo)."""

    production: bool = False
    reserved_tags: FrozenSet[str] = field(
        default_factory=lambda: frozenset(DEFAULT_SETTINGS["reserved_tags"])
    )
    strategies: Mapping[str, StrategyKind] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def is_reserved_tag(self, name: str) -> bool:
        return name.lower() in self.reserved_tags

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "EngineSettings":
        """
        Constrói settings validados a partir de um dicionário parcial.

        Raises:
            UnknownSettingError: Se houver chaves não reconhecidas.
            InvalidSettingValueError: Se algum valor tiver tipo ou conteúdo inválido.
        """
        if not isinstance(raw, Mapping):
            raise InvalidSettingValueError(
                f"Settings devem ser um mapeamento, recebido: {type(raw).__name__}"
            )

        unknown = sorted(set(raw) - _KNOWN_KEYS)
        if unknown:
            raise UnknownSettingError(f"Settings desconhecidos: {', '.join(unknown)}")

        # chaves ausentes assumem os defaults (settings são planos)
        merged = {**DEFAULT_SETTINGS, **raw}

        production = merged["production"]
        if not isinstance(production, bool):
            raise InvalidSettingValueError(
                f"'production' deve ser bool, recebido: {type(production).__name__}"
            )

        tags = merged["reserved_tags"]
        if not isinstance(tags, (list, tuple, set, frozenset)) or not all(
            isinstance(t, str) for t in tags
        ):
            raise InvalidSettingValueError("'reserved_tags' deve ser uma lista de strings")

        strategies = merged["strategies"]
        if not isinstance(strategies, dict):
            raise InvalidSettingValueError(
                f"'strategies' deve ser um mapeamento, recebido: {type(strategies).__name__}"
            )

        kinds: Dict[str, StrategyKind] = {}
        for field_id, kind in strategies.items():
            if not isinstance(field_id, str) or not field_id.strip():
                raise InvalidSettingValueError("chaves de 'strategies' devem ser strings não vazias")
            if kind not in _FILE_STRATEGY_KINDS:
                raise InvalidSettingValueError(
                    f"Estratégia inválida para o campo '{field_id}': {kind!r} "
                    f"(permitidas: {', '.join(sorted(_FILE_STRATEGY_KINDS))})"
                )
            kinds[field_id] = StrategyKind(kind)

        return cls(
            production=production,
            reserved_tags=frozenset(t.lower() for t in tags),
            strategies=MappingProxyType(kinds),
        )
