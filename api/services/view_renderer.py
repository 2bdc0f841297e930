"""
View renderer binding page data to the site templates
"""
from types import MappingProxyType

from flask import render_template
from jinja2 import TemplateError, TemplateNotFound

from utils.errors import TemplateRenderError


class ViewRenderer:
    """Immutable registry of view name -> template, built once per app"""

    def __init__(self, views):
        self.views = MappingProxyType(dict(views))

    def template_for(self, view_name):
        try:
            return self.views[view_name]
        except KeyError:
            raise TemplateRenderError(f"unknown view: {view_name}") from None

    def render(self, view_name, data):
        """Render ``data`` with the view's template; must run inside an app context"""
        template_name = self.template_for(view_name)
        try:
            return render_template(template_name, data=data)
        except TemplateNotFound as e:
            raise TemplateRenderError(f"template not found: {template_name}") from e
        except TemplateError as e:
            raise TemplateRenderError(f"template {template_name}: {e}") from e
