"""Plotly 图表工厂"""
import plotly.graph_objects as go
import plotly.express as px
import pandas as pd

import plotly.io as pio
from config.settings import COLORS

# 自定义 Plotly 主题
pio.templates["credit_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        yaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        colorway=px.colors.qualitative.Plotly,
    )
)
pio.templates.default = "credit_light"


def create_balance_bar(borrowers: pd.DataFrame) -> go.Figure:
    """各借款人余额柱状图（按登记簿顺序）"""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=borrowers["last_name"],
        y=borrowers["balance"],
        marker_color=COLORS["balance"],
        hovertemplate="%{x}<br>%{y:,.2f}<extra></extra>",
    ))
    fig.update_layout(title="Сумма кредита по заемщикам", xaxis_title="Заемщик", yaxis_title="Сумма")
    return fig


def create_cumulative_line(payments: pd.DataFrame) -> go.Figure:
    """累计还款曲线：每个借款人一条线"""
    fig = go.Figure()
    for name, group in payments.groupby("last_name", sort=False):
        fig.add_trace(go.Scatter(
            x=group["date"],
            y=group["amount"].cumsum(),
            mode="lines+markers",
            name=name,
            line_shape="hv",
        ))
    fig.update_layout(title="Накопленная сумма платежей", xaxis_title="Дата", yaxis_title="Сумма")
    return fig


def create_payment_bars(payments: pd.DataFrame) -> go.Figure:
    """单个借款人的还款柱状图，负数金额用另一种颜色"""
    colors = [COLORS["payment"] if a >= 0 else COLORS["refund"] for a in payments["amount"]]
    fig = go.Figure(go.Bar(x=payments["date"], y=payments["amount"], marker_color=colors))
    fig.update_layout(title="Платежи", xaxis_title="Дата", yaxis_title="Сумма")
    return fig
