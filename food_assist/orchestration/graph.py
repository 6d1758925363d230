from langgraph.graph import END, StateGraph

from food_assist.orchestration.nodes.advice import advice_node
from food_assist.orchestration.nodes.intake import intake_node
from food_assist.orchestration.nodes.trace import trace_node
from food_assist.orchestration.nodes.video import video_node
from food_assist.orchestration.state import SubmissionState


def build_workflow():
    graph = StateGraph(SubmissionState)

    graph.add_node("intake", intake_node)
    graph.add_node("advice", advice_node)
    graph.add_node("video_suggestion", video_node)
    graph.add_node("trace", trace_node)

    graph.set_entry_point("intake")

    # Fan out: both branches run in the same step and are joined at trace
    graph.add_edge("intake", "advice")
    graph.add_edge("intake", "video_suggestion")
    graph.add_edge(["advice", "video_suggestion"], "trace")
    graph.add_edge("trace", END)

    return graph.compile()
