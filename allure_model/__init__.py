"""Data model and file writers for Allure test reports: results, steps, containers, labels, links, parameters and attachments."""

__version__ = "0.6.0"