"""Visualisation code for machine definitions."""

from typing import Dict, List, Union

from mealy.machine import MachineDefinition

CytoscapeData = List[Dict[str, Union[Dict[str, str], str]]]


def nodes_for_cytoscape(
    definition: MachineDefinition,
) -> CytoscapeData:
    """Produce Cytoscape.js elements drawing a machine definition."""
    elements: CytoscapeData = []

    for state in definition.all_states():
        node: Dict[str, Union[Dict[str, str], str]] = {
            'data': {'id': str(state)},
        }
        if state == definition.start.state:
            node['classes'] = 'initial'
        elements.append(node)

    for state, rules in definition.transitions.items():
        for rule in rules:
            elements.append({'data': {
                'source': str(state),
                'target': str(rule.target),
                'label': str(rule.label),
            }})

    return elements
