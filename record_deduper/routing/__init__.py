"""
Routing of records into unique and duplicate outputs
"""
from record_deduper.routing.classifier import Classifier, ClassifierState

__all__ = ['Classifier', 'ClassifierState']
