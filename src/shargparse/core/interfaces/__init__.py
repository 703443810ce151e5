from .render import CodegenProtocol, SplicePlannerProtocol, TemplateEngineProtocol

__all__ = [
    'CodegenProtocol',
    'SplicePlannerProtocol',
    'TemplateEngineProtocol',
]
