"""Roadside element generation.

Tree candidates are collected while roads are placed and resolved in a single pass
once the network is complete.
"""
from roadgrid.citygen.element.tree_generator import TreeCandidateCollector
from roadgrid.citygen.element.tree_resolver import TreeResolver

__all__ = ['TreeCandidateCollector', 'TreeResolver']
