from langgraph.graph import StateGraph, END

from .state import PathfinderState
from .pathfinder_agent import chat_turn_node, career_report_node


def build_chat_graph():
    """
    One interview turn:

    START -> chat_turn -> END
    """
    graph = StateGraph(PathfinderState)

    graph.add_node("chat_turn", chat_turn_node)
    graph.set_entry_point("chat_turn")
    graph.add_edge("chat_turn", END)

    return graph.compile()


def build_report_graph():
    """
    Report synthesis from the finished interview:

    START -> career_report -> END
    """
    graph = StateGraph(PathfinderState)

    graph.add_node("career_report", career_report_node)
    graph.set_entry_point("career_report")
    graph.add_edge("career_report", END)

    return graph.compile()


def run_graph(graph, state: PathfinderState) -> PathfinderState:
    """LangGraph works on dicts; convert in and back out of PathfinderState."""
    new_state_dict = graph.invoke(state.model_dump())
    new_state = PathfinderState(**new_state_dict)
    # input is consumed by the chat turn, never carried over
    new_state.pending_input = None
    return new_state
