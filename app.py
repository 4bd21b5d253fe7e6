import streamlit as st

from product_recommender.models.product import FormSelection, RecommendationType
from product_recommender.pipelines.app_service import AppService
from product_recommender.pipelines.form_state import FormState
from product_recommender.utils.exceptions import DataLoadError

st.set_page_config(layout="wide", page_title="Product Recommender")

# ---------- Global CSS ----------
st.markdown("""
<style>
.hero-title {
    font-size: 30px;
    font-weight: 800;
}
.hero-subtitle {
    font-size: 14px;
    color: #6b7280;
}
.product-card {
    border: 1px solid #d1d5db;
    border-radius: 14px;
    padding: 14px 16px;
    margin-bottom: 12px;
}
.product-title {
    font-weight: 700;
    font-size: 17px;
    margin-bottom: 4px;
}
.product-meta {
    font-size: 13px;
    color: #4b5563;
}
.badge {
    display: inline-block;
    padding: 2px 8px;
    border-radius: 999px;
    font-size: 11px;
    font-weight: 600;
    margin-right: 6px;
    background: rgba(93, 156, 255, 0.16);
    color: #2563eb;
}
.badge-pref {
    background: rgba(69, 214, 154, 0.16);
    color: #059669;
}
.badge-feat {
    background: rgba(255, 200, 97, 0.16);
    color: #b45309;
}
</style>
""", unsafe_allow_html=True)

# ---------- Hero header ----------
st.markdown('<div class="hero-title">Recomendador de Produtos RD Station</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="hero-subtitle">'
    'Selecione suas preferências e funcionalidades desejadas e receba recomendações personalizadas.'
    '</div>',
    unsafe_allow_html=True
)
st.write("")

try:
    service = AppService()
except DataLoadError as e:
    st.error(f"Erro ao carregar produtos. Tente novamente. ({e})")
    st.stop()

if "form_state" not in st.session_state:
    st.session_state.form_state = FormState(FormSelection())
    st.session_state.recommendations = []
form_state: FormState = st.session_state.form_state

# First option is the default recommendation type.
TYPE_LABELS = {
    RecommendationType.MULTIPLE_PRODUCTS: "Múltiplos Produtos",
    RecommendationType.SINGLE_PRODUCT: "Produto Único",
}

# ---------- Layout: two columns ----------
left_col, right_col = st.columns([1, 1.5])

with left_col:
    st.subheader("Configure suas Preferências")

    # Widgets own their values through these keys; form_state mirrors them.
    prefs = st.multiselect("Preferências", service.list_preferences(), key="prefs_main")
    feats = st.multiselect("Funcionalidades", service.list_features(), key="feats_main")
    rec_type = st.radio(
        "Tipo de Recomendação",
        list(TYPE_LABELS),
        format_func=TYPE_LABELS.get,
        key="type_main",
    )

    form_state.handle_change("selected_preferences", prefs)
    form_state.handle_change("selected_features", feats)
    form_state.handle_change("selected_recommendation_type", rec_type)

    def reset_form() -> None:
        initial = form_state.reset()
        st.session_state["prefs_main"] = list(initial.selected_preferences)
        st.session_state["feats_main"] = list(initial.selected_features)
        st.session_state["type_main"] = initial.selected_recommendation_type
        st.session_state.recommendations = []

    submit_col, reset_col = st.columns(2)
    with submit_col:
        if st.button("✨ Obter recomendação", disabled=not form_state.has_selections(), key="submit_main"):
            st.session_state.recommendations = service.get_recommendations(form_state.form_selection)
    with reset_col:
        st.button(
            "Limpar",
            disabled=not form_state.has_selections(),
            on_click=reset_form,
            key="reset_main",
        )

with right_col:
    st.subheader("Lista de Recomendações")
    recs = st.session_state.recommendations
    if not recs:
        st.write("Nenhuma recomendação encontrada.")
    for rec in recs:
        p = rec.product
        pref_badges = "".join(f"<span class='badge badge-pref'>{x}</span>" for x in p.preferences)
        feat_badges = "".join(f"<span class='badge badge-feat'>{x}</span>" for x in p.features)
        st.markdown(
            f"""
            <div class="product-card">
                <div class="product-title">{p.name}</div>
                <div class="product-meta">
                    <span class="badge">{p.category}</span>
                    <span class="badge">Score {rec.score}</span>
                </div>
                <div class="product-meta"><b>Preferências:</b> {pref_badges}</div>
                <div class="product-meta"><b>Funcionalidades:</b> {feat_badges}</div>
            </div>
            """,
            unsafe_allow_html=True,
        )
