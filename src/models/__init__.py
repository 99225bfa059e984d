"""Data models for Confluence pages."""

from src.models.confluence_page import ConfluencePage, parse_page_response

__all__ = ['ConfluencePage', 'parse_page_response']
