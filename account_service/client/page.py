# streamlit run account_service/client/page.py

import httpx
import streamlit as st

from account_service.client.api import AccountApi
from account_service.client.form import LOGGED_IN_VIEW, LOGIN, SIGNUP, AccountForm, confirmation_text
from account_service.config import settings


def _form() -> AccountForm:
    if "form" not in st.session_state:
        client = httpx.Client(base_url=settings.api_base_url, timeout=10.0)
        st.session_state["form"] = AccountForm(AccountApi(client))
    return st.session_state["form"]


def confirmation_page(navigation):
    st.success(confirmation_text(navigation.view, navigation.email))
    label = "Logout" if navigation.view == LOGGED_IN_VIEW else "Login"
    if st.button(label):
        st.session_state.pop("navigation", None)
        st.rerun()


def form_page():
    form = _form()
    st.title(f"{'Login' if form.mode == LOGIN else 'SignUp'} Form")

    left, right = st.columns(2)
    if left.button("Login", type="primary" if form.mode == LOGIN else "secondary"):
        form.switch_mode(LOGIN)
        st.rerun()
    if right.button("Signup", type="primary" if form.mode == SIGNUP else "secondary"):
        form.switch_mode(SIGNUP)
        st.rerun()

    with st.form("account_form"):
        if form.mode == SIGNUP:
            form.username = st.text_input("Name", value=form.username)
        form.email = st.text_input("Email", value=form.email)
        form.password = st.text_input("Password", type="password", value=form.password)
        submitted = st.form_submit_button("Login" if form.mode == LOGIN else "Signup")

    if submitted:
        navigation = form.submit()
        if navigation is not None:
            st.session_state["navigation"] = navigation
            st.rerun()

    if form.message:
        st.error(form.message)


if "navigation" in st.session_state:
    confirmation_page(st.session_state["navigation"])
else:
    form_page()
